import unittest
from webstrings import case

class TestToCamelCase(unittest.TestCase):
    def test_kebab(self):
        self.assertEqual(case.to_camel_case('background-color'), 'backgroundColor')

    def test_snake(self):
        self.assertEqual(case.to_camel_case('hello_world'), 'helloWorld')

    def test_leading_separator_capitalizes(self):
        self.assertEqual(case.to_camel_case('_hello_world'), 'HelloWorld')
        self.assertEqual(case.to_camel_case('-webkit-scrollbar-thumb'), 'WebkitScrollbarThumb')

    def test_separator_runs_and_whitespace(self):
        self.assertEqual(case.to_camel_case('  foo -_ bar  baz '), 'fooBarBaz')

    def test_trailing_separator_dropped(self):
        self.assertEqual(case.to_camel_case('foo_'), 'foo')

class TestToPascalCase(unittest.TestCase):
    def test_mixed_separators(self):
        self.assertEqual(case.to_pascal_case('foo_bar-baz'), 'FooBarBaz')
        self.assertEqual(case.to_pascal_case('hello.world'), 'HelloWorld')

    def test_keeps_inner_case(self):
        self.assertEqual(case.to_pascal_case('hello wORLD 2nd'), 'HelloWORLD2nd')

    def test_empty(self):
        self.assertEqual(case.to_pascal_case(''), '')
        self.assertEqual(case.to_pascal_case('-- __'), '')

class TestFirstUppercase(unittest.TestCase):
    def test_first_uppercase(self):
        self.assertEqual(case.first_uppercase('hello world'), 'Hello world')

    def test_empty(self):
        self.assertEqual(case.first_uppercase(''), '')

class TestUppercaseWords(unittest.TestCase):
    def test_uppercase_words(self):
        self.assertEqual(case.uppercase_words('hello world'), 'Hello World')

    def test_whitespace_preserved(self):
        self.assertEqual(case.uppercase_words('a\tb  c'), 'A\tB  C')

class TestKebabToCamel(unittest.TestCase):
    def test_kebab_to_camel(self):
        self.assertEqual(case.kebab_to_camel('background-color'), 'backgroundColor')

    def test_leading_and_double_hyphen(self):
        self.assertEqual(case.kebab_to_camel('-webkit-box'), 'WebkitBox')
        self.assertEqual(case.kebab_to_camel('a--b'), 'a-b')

class TestCamelToKebab(unittest.TestCase):
    def test_camel_to_kebab(self):
        self.assertEqual(case.camel_to_kebab('backgroundColor'), 'background-color')

    def test_digit_boundary(self):
        self.assertEqual(case.camel_to_kebab('h1Title'), 'h1-title')

    def test_round_trip(self):
        for word in ['backgroundColor', 'borderTopLeftRadius', 'color']:
            self.assertEqual(case.kebab_to_camel(case.camel_to_kebab(word)), word)
