"""
utilities for inspecting and editing token trees

these functions hold no state. trees are compared and matched
structurally, statements are found and replaced by identity.
"""
from .token import Token, TokenError

class TransformError(TokenError):
    pass

def isEqualAst(lhs, rhs):
    """ returns true if two trees have the same shape

    type, value and children are compared recursively. source position
    and object identity are ignored.
    """

    queue = [(lhs, rhs)]

    while queue:
        a, b = queue.pop()

        if a is None or b is None:
            if a is not b:
                return False
            continue

        if a.type != b.type or a.value != b.value:
            return False

        if len(a.children) != len(b.children):
            return False

        queue.extend(zip(a.children, b.children))

    return True

def matchesAst(pattern):
    """ build a predicate from a declarative pattern

    a pattern is one of:
        dict:     maps token attributes (type, value, children, ...)
                  to nested patterns. every field must match
        list:     a sequence of patterns, one per item. the
                  sequence length must match exactly
        callable: used as the predicate directly
        other:    compared with ==

    example:

        isThis = matchesAst({'type': Token.T_KEYWORD, 'value': 'this'})
    """

    if callable(pattern):
        return pattern

    if isinstance(pattern, dict):
        fields = [(key, matchesAst(value)) for key, value in pattern.items()]

        def match(token):
            if token is None:
                return False
            for key, test in fields:
                if not test(getattr(token, key, None)):
                    return False
            return True

        return match

    if isinstance(pattern, list):
        tests = [matchesAst(item) for item in pattern]

        def match(seq):
            if seq is None or len(seq) != len(tests):
                return False
            return all(test(item) for test, item in zip(tests, seq))

        return match

    return lambda value: value == pattern

def multiReplaceStatement(parent, node, replacements):
    """ replace a single statement with zero or more statements

    :param parent: the token containing node as a direct child
    :param node: the statement to remove
    :param replacements: tokens inserted in place of node, in order
    """

    if parent is None:
        raise TransformError(node, "statement has no parent")

    for index, child in enumerate(parent.children):
        if child is node:
            parent.children[index:index + 1] = list(replacements)
            return

    raise TransformError(node, "statement not found in %s" % parent.type)

def extractComments(nodes):
    """ returns copies of the leading comments for each node, in order """
    comments = []
    for node in nodes:
        comments.extend(comment.clone() for comment in node.comments)
    return comments

def isThis(token):
    return token is not None and \
        token.type == Token.T_KEYWORD and token.value == 'this'
