#! cd .. && python3 -m protoclass.transform
"""
detect constructor functions and convert them into classes

    function Dog(name) {
        Animal.call(this, name)
    }
    Dog.prototype = Object.create(Animal.prototype)
    Dog.prototype.constructor = Dog
    Dog.prototype.bark = function() {}

becomes

    class Dog extends Animal {
        constructor(name) {
            super(name)
        }
        bark() {}
    }
"""
import ast as py_ast
import logging
import re

from .token import Token
from .astutil import TransformError, matchesAst
from .method import MethodCandidate
from .candidate import ClassCandidate

log = logging.getLogger("protoclass.transform")

def literal_eval(token):
    try:
        return py_ast.literal_eval(token.value)
    except (SyntaxError, ValueError):
        pass
    raise TransformError(token, "syntax error")

def isConvertibleFunction(token):
    """ arrow functions, generators and async functions are not converted """
    return token.type in (Token.T_FUNCTION, Token.T_ANONYMOUS_FUNCTION) and \
        len(token.children) == 3 and token.children[2].type == Token.T_BLOCK

def isClassReference(token):
    """ true for `A` or `A.B.C` """
    while token.type == Token.T_GET_ATTR and token.value == '.':
        if len(token.children) != 2 or token.children[1].type != Token.T_ATTR:
            return False
        token = token.children[0]
    return token.type == Token.T_TEXT

# A.prototype
matchPrototype = matchesAst({
    'type': Token.T_GET_ATTR,
    'value': '.',
    'children': [
        {'type': Token.T_TEXT},
        {'type': Token.T_ATTR, 'value': 'prototype'},
    ],
})

# A.prototype.name
matchPrototypeMember = matchesAst({
    'type': Token.T_GET_ATTR,
    'value': '.',
    'children': [
        matchPrototype,
        {'type': Token.T_ATTR},
    ],
})

# Object.create(B.prototype)
matchObjectCreate = matchesAst({
    'type': Token.T_FUNCTIONCALL,
    'children': [
        {
            'type': Token.T_GET_ATTR,
            'value': '.',
            'children': [
                {'type': Token.T_TEXT, 'value': 'Object'},
                {'type': Token.T_ATTR, 'value': 'create'},
            ],
        },
        {
            'type': Token.T_ARGLIST,
            'children': [{
                'type': Token.T_GET_ATTR,
                'value': '.',
                'children': [
                    isClassReference,
                    {'type': Token.T_ATTR, 'value': 'prototype'},
                ],
            }],
        },
    ],
})

# util.inherits(A, B)
matchUtilInherits = matchesAst({
    'type': Token.T_FUNCTIONCALL,
    'children': [
        {
            'type': Token.T_GET_ATTR,
            'value': '.',
            'children': [
                {'type': Token.T_TEXT, 'value': 'util'},
                {'type': Token.T_ATTR, 'value': 'inherits'},
            ],
        },
        {
            'type': Token.T_ARGLIST,
            'children': [{'type': Token.T_TEXT}, isClassReference],
        },
    ],
})

def isIdentifier(name):
    """ true for a valid javascript identifier name """
    return re.match(r"^[A-Za-z_$][\w$]*$", name) is not None

def isAssign(token):
    return token.type == Token.T_ASSIGN and token.value == '=' and \
        len(token.children) == 2

class TransformBase(object):
    def __init__(self):
        super(TransformBase, self).__init__()
        self.tokens = []

    def transform(self, ast):

        self.scan(ast)

    def scan(self, token):

        self.tokens = [(token, None)]

        while self.tokens:
            # process tokens in the order they are discovered. (DFS)
            # children are collected after the visit so that
            # replacements made by the visit are also scanned
            token, parent = self.tokens.pop()

            self.visit(token, parent)

            for child in reversed(token.children):
                self.tokens.append((child, token))

    def visit(self, token, parent):
        raise NotImplementedError()

class TransformClasses(TransformBase):
    """
    convert constructor functions and prototype assignments into classes

    every statement list (module or block) is processed independently.
    a function is only converted when it has at least one prototype
    method or a super class.
    """

    W_DUPLICATE_CLASS = "duplicate_class"
    W_DUPLICATE_METHOD = "duplicate_method"
    W_BEFORE_DECLARATION = "before_declaration"
    W_MULTIPLE_INHERITANCE = "multiple_inheritance"
    W_UNSUPPORTED_PROTOTYPE = "unsupported_prototype"

    def __init__(self, opts=None):
        super(TransformClasses, self).__init__()

        if not opts:
            opts = {}

        self.inheritance = opts.get('inheritance', True)
        self.prototype_objects = opts.get('prototype_objects', True)

        self.warnings = {
            TransformClasses.W_DUPLICATE_CLASS: "function declared more than once, not converted",
            TransformClasses.W_DUPLICATE_METHOD: "method defined more than once",
            TransformClasses.W_BEFORE_DECLARATION: "prototype modified before the constructor is declared, not converted",
            TransformClasses.W_MULTIPLE_INHERITANCE: "super class assigned more than once, not converted",
            TransformClasses.W_UNSUPPORTED_PROTOTYPE: "unsupported prototype assignment, not converted",
        }
        self.warnings_count = {}

        self.disabled_warnings = set()
        self.disable_all_warnings = False

        # names of the classes created by the most recent transform
        self.classes = []

    def transform(self, ast):
        """ convert all candidates in the tree

        :param ast: the token tree, modified in place
        :returns: the names of the classes which were created
        """
        self.classes = []
        self.scan(ast)
        return self.classes

    def warn(self, token, type, message=None):
        """
        log a warning message, up to N of each type, as long as
        warnings are not disabled
        """

        self.warnings_count[type] = self.warnings_count.get(type, 0) + 1

        if self.warnings_count[type] > 5:
            return

        if self.disable_all_warnings:
            return

        if type in self.disabled_warnings:
            return

        text = self.warnings[type]
        if message:
            text += ": " + message

        log.warning("line: %d column: %d type: %s : %s",
            token.line, token.index, token.type, text)

    def visit(self, token, parent):

        if token.type in (Token.T_MODULE, Token.T_BLOCK):
            self._transformBlock(token)

    def _transformBlock(self, block):

        candidates, positions = self._findCandidates(block)

        if not candidates:
            return

        superClasses = {}
        related = {}
        # names whose prototype was modified by a previous statement
        touched = set()

        for index, stmt in enumerate(block.children):

            name = self._prototypeOwner(stmt)

            if name not in candidates:
                continue

            if index < positions[name]:
                self.warn(stmt, TransformClasses.W_BEFORE_DECLARATION, name)
                del candidates[name]
                continue

            candidate = candidates[name]

            if self._matchConstructorReset(stmt, name):
                related.setdefault(name, []).append((block, stmt))
                continue

            if name in touched and self._replacesPrototype(stmt):
                # members and inheritance set up by earlier statements
                # are discarded when the prototype is replaced
                self.warn(stmt, TransformClasses.W_UNSUPPORTED_PROTOTYPE, name)
                del candidates[name]
                continue

            touched.add(name)

            superClass = self._matchSuperClass(stmt)
            if superClass is not None:
                if not self.inheritance:
                    self.warn(stmt, TransformClasses.W_UNSUPPORTED_PROTOTYPE, name)
                    del candidates[name]
                elif name in superClasses:
                    self.warn(stmt, TransformClasses.W_MULTIPLE_INHERITANCE, name)
                    del candidates[name]
                else:
                    superClasses[name] = superClass
                    related.setdefault(name, []).append((block, stmt))
                continue

            methods = self._matchPrototypeMethods(stmt, block)
            if methods is not None:
                for method in methods:
                    if any(m.getName() == method.getName() for m in candidate.methods):
                        self.warn(method.methodNode, TransformClasses.W_DUPLICATE_METHOD, method.getName())
                    candidate.addMethod(method)
                continue

            if matchPrototype(stmt.children[0]):
                # the prototype is replaced with something that
                # can not be expressed as a class body
                self.warn(stmt, TransformClasses.W_UNSUPPORTED_PROTOTYPE, name)
                del candidates[name]

        for name, candidate in candidates.items():

            if name in superClasses:
                candidate.setSuperClass(superClasses[name], related[name])

            if not candidate.isTransformable():
                continue

            candidate.transform()
            self.classes.append(name)
            log.debug("converted `%s` into a class (line %d)",
                name, candidate.getFullNode().line)

    def _findCandidates(self, block):

        candidates = {}
        positions = {}
        rejected = set()

        for index, stmt in enumerate(block.children):

            candidate = self._matchFunctionDeclaration(stmt, block)
            if candidate is None:
                candidate = self._matchFunctionVar(stmt, block)
            if candidate is None:
                continue

            name = candidate.getName()
            if name in candidates or name in rejected:
                self.warn(stmt, TransformClasses.W_DUPLICATE_CLASS, name)
                candidates.pop(name, None)
                rejected.add(name)
                continue

            candidates[name] = candidate
            positions[name] = index

        return candidates, positions

    def _matchFunctionDeclaration(self, stmt, block):
        """
        function A() {}
        export function A() {}
        """

        parent, node = block, stmt
        if stmt.type == Token.T_EXPORT and stmt.children:
            parent, node = stmt, stmt.children[0]

        if node.type != Token.T_FUNCTION or not isConvertibleFunction(node):
            return None

        name = node.children[0].value
        if not name:
            return None

        constructor = MethodCandidate('constructor', node, node, [], parent)
        return ClassCandidate(name, constructor, node, [node], parent)

    def _matchFunctionVar(self, stmt, block):
        """
        var A = function() {}
        """

        if stmt.type != Token.T_VAR or len(stmt.children) != 1:
            return None

        assign = stmt.children[0]
        if not isAssign(assign):
            return None

        lhs, rhs = assign.children
        if lhs.type != Token.T_TEXT or not isConvertibleFunction(rhs):
            return None

        constructor = MethodCandidate('constructor', rhs, rhs, [], assign)
        return ClassCandidate(lhs.value, constructor, stmt, [stmt], block)

    def _prototypeOwner(self, stmt):
        """ returns the name of the constructor whose prototype
        is modified by the statement, or None
        """

        if matchUtilInherits(stmt):
            return stmt.children[1].children[0].value

        if not isAssign(stmt):
            return None

        lhs = stmt.children[0]
        if matchPrototype(lhs):
            return lhs.children[0].value
        if matchPrototypeMember(lhs):
            return lhs.children[0].children[0].value
        return None

    def _replacesPrototype(self, stmt):
        """
        A.prototype = ...

        util.inherits is not a replacement, it only changes the
        prototype chain of the existing prototype
        """
        return isAssign(stmt) and matchPrototype(stmt.children[0])

    def _matchConstructorReset(self, stmt, name):
        """
        A.prototype.constructor = A
        """
        if not isAssign(stmt):
            return False
        lhs, rhs = stmt.children
        return matchPrototypeMember(lhs) and \
            lhs.children[1].value == 'constructor' and \
            rhs.type == Token.T_TEXT and rhs.value == name

    def _matchSuperClass(self, stmt):
        """ returns the super class expression for

            util.inherits(A, B)
            A.prototype = Object.create(B.prototype)
            A.prototype = new B()
        """

        if matchUtilInherits(stmt):
            return stmt.children[1].children[1]

        if not isAssign(stmt) or not matchPrototype(stmt.children[0]):
            return None

        rhs = stmt.children[1]

        if matchObjectCreate(rhs):
            return rhs.children[1].children[0].children[0]

        if rhs.type == Token.T_NEW and len(rhs.children) == 1:
            target = rhs.children[0]
            if target.type == Token.T_FUNCTIONCALL:
                callee, arglist = target.children
                if arglist.children:
                    # arguments passed to the parent constructor can not
                    # be expressed with extends
                    return None
                target = callee
            if isClassReference(target):
                return target

        return None

    def _matchPrototypeMethods(self, stmt, block):
        """ returns a list of methods for

            A.prototype.b = function() {}
            A.prototype = {b: function() {}, c() {}}

        """

        if not isAssign(stmt):
            return None

        lhs, rhs = stmt.children

        if matchPrototypeMember(lhs):
            name = lhs.children[1].value
            if name == 'constructor' or not isConvertibleFunction(rhs):
                return None
            return [MethodCandidate(name, rhs, stmt, [stmt], block)]

        if matchPrototype(lhs) and rhs.type == Token.T_OBJECT and self.prototype_objects:
            return self._matchPrototypeObject(lhs.children[0].value, stmt, rhs, block)

        return None

    def _matchPrototypeObject(self, className, stmt, obj, block):

        entries = []
        for entry in obj.children:
            if entry.type == Token.T_FUNCTION and isConvertibleFunction(entry):
                entries.append((entry.children[0].value, entry, entry))
                continue

            if entry.type != Token.T_BINARY or entry.value != ':' or len(entry.children) != 2:
                return None

            key, value = entry.children

            if key.type == Token.T_TEXT:
                name = key.value
            elif key.type == Token.T_STRING:
                name = literal_eval(key)
                if not isinstance(name, str) or not isIdentifier(name):
                    return None
            else:
                return None

            if name == 'constructor' and value.type == Token.T_TEXT and value.value == className:
                continue

            if name == 'constructor' or not isConvertibleFunction(value):
                return None

            entries.append((name, value, entry))

        if not entries:
            return None

        methods = []
        for name, fn, entry in entries:
            if not methods:
                # the first method removes the whole statement
                methods.append(MethodCandidate(name, fn, stmt, [stmt, entry], block))
            else:
                methods.append(MethodCandidate(name, fn, None, [entry], block))
        return methods
