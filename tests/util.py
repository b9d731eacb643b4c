from itertools import zip_longest

from protoclass.token import Token

def tokcmp(a, b):
    if a is None:
        return False
    if b is None:
        return False

    depth1, tok1 = a
    depth2, tok2 = b

    return depth1 == depth2 and tok1.type == tok2.type and tok1.value == tok2.value

def parsecmp(expected, actual, debug=False):
    """ returns the number of tokens which differ between two trees """

    a = actual.flatten()
    b = expected.flatten()

    seq = list(zip_longest(a, b))
    error_count = sum(1 for x, y in seq if not tokcmp(x, y))

    if error_count > 0 or debug:
        print("\n--- %-50s | --- %-.50s" % ("    HYP", "    REF"))
        for a, b in seq:
            c = ' ' if tokcmp(a, b) else '|'
            if not a:
                a = (0, None)
            if not b:
                b = (0, None)
            print("%3d %-50r %s %3d %-.50r" % (a[0], a[1], c, b[0], b[1]))
        print(actual.toString(2))
    return error_count

def TOKEN(t, v, *children):
    return Token(getattr(Token, t), 1, 0, v, children)

# builders for commonly used javascript expressions

def TEXT(name):
    return TOKEN('T_TEXT', name)

def THIS():
    return TOKEN('T_KEYWORD', 'this')

def ATTR(name, *attrs):
    """ ATTR('a', 'b', 'c') => a.b.c """
    tok = TEXT(name) if isinstance(name, str) else name
    for attr in attrs:
        tok = TOKEN('T_GET_ATTR', '.', tok, TOKEN('T_ATTR', attr))
    return tok

def CALL(callee, *args):
    return TOKEN('T_FUNCTIONCALL', '', callee, TOKEN('T_ARGLIST', '()', *args))

def ASSIGN(lhs, rhs):
    return TOKEN('T_ASSIGN', '=', lhs, rhs)

def FUNCTION(name, params, *body):
    return TOKEN('T_FUNCTION', 'function',
        TEXT(name),
        TOKEN('T_ARGLIST', '()', *[TEXT(p) for p in params]),
        TOKEN('T_BLOCK', '{}', *body))

def ANONYMOUS(params, *body):
    return TOKEN('T_ANONYMOUS_FUNCTION', 'function',
        TEXT('Anonymous'),
        TOKEN('T_ARGLIST', '()', *[TEXT(p) for p in params]),
        TOKEN('T_BLOCK', '{}', *body))

def RETURN(value):
    return TOKEN('T_RETURN', 'return', value)

def DOC(text):
    return TOKEN('T_DOCUMENTATION', text)
