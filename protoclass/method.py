
from .token import Token
from .astutil import TransformError, multiReplaceStatement, extractComments

class MethodCandidate(object):
    """
    A function which will become a method of a class.

    the constructor function itself and every function assigned to the
    prototype are represented as method candidates.
    """

    def __init__(self, name, methodNode, fullNode, commentNodes=None, parent=None, kind=''):
        """
        :param name: the method name
        :param methodNode: the function token providing arguments and body
        :param fullNode: the statement removed after converting to a class.
                         None if the statement is owned by a sibling method
        :param commentNodes: tokens to extract leading comments from
        :param parent: the token containing fullNode
        :param kind: one of '', 'get', 'set', 'static'
        """
        super(MethodCandidate, self).__init__()
        self.name = name
        self.methodNode = methodNode
        self.fullNode = fullNode
        self.commentNodes = commentNodes or []
        self.parent = parent
        self.kind = kind

    def getName(self):
        return self.name

    def getArgList(self):
        return self.methodNode.children[1]

    def getBody(self):
        """ returns the T_BLOCK body of the function """
        body = self.methodNode.children[2]
        if body.type != Token.T_BLOCK:
            raise TransformError(body, "expected function body")
        return body

    def isEmpty(self):
        return len(self.getBody().children) == 0

    def toMethodDefinition(self):
        """ the arguments and body are shared with the original function """
        node = self.methodNode
        tok = Token(Token.T_METHOD, node.line, node.index, self.kind, [
            Token(Token.T_TEXT, node.line, node.index, self.name),
            self.getArgList(),
            self.getBody(),
        ])
        tok.comments = extractComments(self.commentNodes)
        return tok

    def remove(self):
        """ delete the statement which declared this method """
        if self.fullNode is None:
            return
        multiReplaceStatement(self.parent, self.fullNode, [])
