
from .token import Token
from .astutil import isEqualAst, matchesAst, multiReplaceStatement, \
    extractComments, isThis

class ClassCandidate(object):
    """
    Represents a potential class to be created.

    A candidate is built from a constructor function, collects methods and
    an optional super class, and is committed exactly once by transform()
    """

    def __init__(self, name, constructor, fullNode, commentNodes, parent):
        """
        :param name: the class name
        :param constructor: MethodCandidate for the constructor function
        :param fullNode: the token to replace after converting to a class
        :param commentNodes: tokens to extract leading comments from
        :param parent: the token containing fullNode
        """
        super(ClassCandidate, self).__init__()
        self.name = name
        self.constructor = constructor
        self.fullNode = fullNode
        self.superClass = None
        self.commentNodes = commentNodes
        self.parent = parent
        self.methods = []
        self.replacements = []

    def getName(self):
        return self.name

    def getFullNode(self):
        """ returns the token for the original function """
        return self.fullNode

    def setSuperClass(self, superClass, relatedExpressions):
        """
        Set the super class and queue the related statements to be
        removed during transform.

        :param superClass: the super class expression
        :param relatedExpressions: sequence of (parent, node) pairs,
                                   statements which set up inheritance
        """
        self.superClass = superClass
        for related in relatedExpressions:
            if isinstance(related, dict):
                parent, node = related['parent'], related['node']
            else:
                parent, node = related
            self.replacements.append({
                'parent': parent,
                'node': node,
                'replacements': [],
            })

    def addMethod(self, method):
        self.methods.append(method)

    def isTransformable(self):
        """ true when there is at least one method or a super class """
        return len(self.methods) > 0 or self.superClass is not None

    def transform(self):
        """
        Replace the original constructor function and manual prototype
        assignments with a class declaration.
        """
        multiReplaceStatement(self.parent, self.fullNode, [self.toClassDeclaration()])

        for replacement in self.replacements:
            multiReplaceStatement(**replacement)

        for method in self.methods:
            method.remove()

    def toClassDeclaration(self):
        ln = self.fullNode.line
        idx = self.fullNode.index

        extends = Token(Token.T_KEYWORD, ln, idx, "extends")
        if self.superClass is not None:
            extends.children.append(self.superClass)

        tok = Token(Token.T_CLASS, ln, idx, "class", [
            Token(Token.T_TEXT, ln, idx, self.name),
            extends,
            Token(Token.T_CLASS_BLOCK, ln, idx, "{}", self.createMethods()),
        ])
        tok.comments = extractComments(self.commentNodes)
        return tok

    def createMethods(self):
        methods = [self.createConstructor()]
        methods.extend(method.toMethodDefinition() for method in self.methods)
        return [method for method in methods if method is not None]

    def createConstructor(self):
        if self.constructor.isEmpty():
            return None

        self.modifySuperCalls()
        return self.constructor.toMethodDefinition()

    def modifySuperCalls(self):
        """
        rewrite `Parent.call(this, ...)` into `super(...)`

        only the top level statements of the constructor are inspected.
        a call inside of a branch or nested function is not changed.
        """

        matchSuperConstructorCall = matchesAst({
            'type': Token.T_FUNCTIONCALL,
            'children': [
                {
                    'type': Token.T_GET_ATTR,
                    'value': '.',
                    'children': [
                        lambda obj: isEqualAst(obj, self.superClass),
                        {'type': Token.T_ATTR, 'value': 'call'},
                    ],
                },
                {
                    'type': Token.T_ARGLIST,
                    'children': lambda args: len(args) >= 1 and isThis(args[0]),
                },
            ],
        })

        for stmt in self.constructor.getBody().children:
            if matchSuperConstructorCall(stmt):
                callee, arglist = stmt.children
                stmt.children[0] = Token(Token.T_KEYWORD, callee.line, callee.index, "super")
                arglist.children = arglist.children[1:]
