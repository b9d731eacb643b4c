
from .token import Token, TokenError
from .astutil import TransformError, isEqualAst, matchesAst, \
    multiReplaceStatement, extractComments
from .method import MethodCandidate
from .candidate import ClassCandidate
from .transform import TransformBase, TransformClasses

def convert(ast: Token, opts=None) -> list:
    """ Convert constructor functions into classes

    :param ast: a parsed javascript module, modified in place
    :param opts: transform options
                 inheritance: If True, convert manual prototype chains
                              into `extends` and `super()`
                 prototype_objects: If True, accept methods assigned
                                    as an object to the prototype
    :returns: the names of the classes which were created
    """

    xform = TransformClasses(opts)
    return xform.transform(ast)
