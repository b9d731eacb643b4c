#! cd .. && python3 -m tests.astutil_test


import unittest
from tests.util import parsecmp, TOKEN, TEXT, THIS, ATTR, CALL, DOC

from protoclass.token import Token
from protoclass.astutil import TransformError, isEqualAst, matchesAst, \
    multiReplaceStatement, extractComments, isThis

class IsEqualAstTestCase(unittest.TestCase):

    def test_001_equal_ignores_position(self):

        lhs = ATTR('lib', 'Animal')
        rhs = Token(Token.T_GET_ATTR, 10, 4, '.', [
            Token(Token.T_TEXT, 10, 4, 'lib'),
            Token(Token.T_ATTR, 10, 8, 'Animal'),
        ])

        self.assertTrue(isEqualAst(lhs, rhs))
        self.assertTrue(isEqualAst(rhs, lhs))

    def test_001_not_equal_value(self):

        self.assertFalse(isEqualAst(ATTR('lib', 'Animal'), ATTR('lib', 'Dog')))

    def test_001_not_equal_type(self):

        self.assertFalse(isEqualAst(TEXT('Animal'), TOKEN('T_ATTR', 'Animal')))

    def test_001_not_equal_children(self):

        self.assertFalse(isEqualAst(CALL(TEXT('f'), TEXT('a')), CALL(TEXT('f'))))

    def test_001_none(self):

        self.assertTrue(isEqualAst(None, None))
        self.assertFalse(isEqualAst(TEXT('a'), None))
        self.assertFalse(isEqualAst(None, TEXT('a')))

class MatchesAstTestCase(unittest.TestCase):

    def test_001_literal_fields(self):

        match = matchesAst({'type': Token.T_KEYWORD, 'value': 'this'})

        self.assertTrue(match(THIS()))
        self.assertFalse(match(TEXT('this')))
        self.assertFalse(match(None))

    def test_001_nested_children(self):

        match = matchesAst({
            'type': Token.T_GET_ATTR,
            'children': [
                {'type': Token.T_TEXT, 'value': 'a'},
                {'type': Token.T_ATTR},
            ],
        })

        self.assertTrue(match(ATTR('a', 'b')))
        self.assertFalse(match(ATTR('b', 'a')))
        # the number of children must match
        self.assertFalse(match(TOKEN('T_GET_ATTR', '.', TEXT('a'))))

    def test_001_predicate(self):

        match = matchesAst({
            'type': Token.T_ARGLIST,
            'children': lambda args: len(args) >= 1 and isThis(args[0]),
        })

        self.assertTrue(match(TOKEN('T_ARGLIST', '()', THIS(), TEXT('a'))))
        self.assertFalse(match(TOKEN('T_ARGLIST', '()', TEXT('a'), THIS())))
        self.assertFalse(match(TOKEN('T_ARGLIST', '()')))

    def test_001_callable_pattern(self):

        match = matchesAst(isThis)

        self.assertIs(match, isThis)

class MultiReplaceStatementTestCase(unittest.TestCase):

    def test_001_remove(self):

        a, b, c = TEXT('a'), TEXT('b'), TEXT('c')
        mod = TOKEN('T_MODULE', '', a, b, c)

        multiReplaceStatement(mod, b, [])

        expected = TOKEN('T_MODULE', '', TEXT('a'), TEXT('c'))
        self.assertFalse(parsecmp(expected, mod, False))

    def test_001_replace_many(self):

        a, b, c = TEXT('a'), TEXT('b'), TEXT('c')
        mod = TOKEN('T_MODULE', '', a, b, c)

        multiReplaceStatement(mod, b, [TEXT('x'), TEXT('y')])

        expected = TOKEN('T_MODULE', '',
            TEXT('a'), TEXT('x'), TEXT('y'), TEXT('c'))
        self.assertFalse(parsecmp(expected, mod, False))

    def test_001_replace_by_identity(self):

        # two structurally equal statements, only the given one is replaced
        first, second = TEXT('a'), TEXT('a')
        mod = TOKEN('T_MODULE', '', first, second)

        multiReplaceStatement(mod, second, [TEXT('b')])

        self.assertIs(mod.children[0], first)
        self.assertEqual(mod.children[1].value, 'b')

    def test_001_missing_node(self):

        mod = TOKEN('T_MODULE', '', TEXT('a'))

        with self.assertRaises(TransformError):
            multiReplaceStatement(mod, TEXT('a'), [])

    def test_001_missing_parent(self):

        with self.assertRaises(TransformError):
            multiReplaceStatement(None, TEXT('a'), [])

class ExtractCommentsTestCase(unittest.TestCase):

    def test_001_extract(self):

        a = TEXT('a')
        a.comments = [DOC('/** one */'), DOC('/** two */')]
        b = TEXT('b')
        c = TEXT('c')
        c.comments = [DOC('/** three */')]

        comments = extractComments([a, b, c])

        self.assertEqual([t.value for t in comments],
            ['/** one */', '/** two */', '/** three */'])
        # comments are copied, not moved
        self.assertIsNot(comments[0], a.comments[0])
        self.assertEqual(len(a.comments), 2)

    def test_001_extract_empty(self):

        self.assertEqual(extractComments([]), [])

def main():
    unittest.main()

if __name__ == '__main__':
    main()
