# std
import re
import threading

# third-party
import pytest

# local
from inkwell.errors import InvalidArgument, UnsupportedLanguage
from inkwell.inflection import REGISTRY, Inflector, Registry, RuleTable


# ---------------------------------------------------------------------------- #
@pytest.fixture
def registry():
    return Registry.default()


# ---------------------------------------------------------------------------- #
class TestRuleTable:

    def test_normalize(self):
        table = RuleTable('EN', {'x$': 'xen'}, [('xen$', 'x')], {'Foo': 'BAR'},
                          ['Rice'])
        assert table.language == 'en'
        assert isinstance(table.plural, tuple)
        pattern, replacement = table.plural[0]
        assert isinstance(pattern, re.Pattern)
        assert pattern.flags & re.IGNORECASE
        assert replacement == 'xen'
        assert dict(table.irregular) == {'foo': 'bar'}
        assert table.irregular_inverse == {'bar': 'foo'}
        assert table.uncountable == {'rice'}

    def test_compiled_patterns_kept(self):
        pattern = re.compile('ı$')
        table = RuleTable('tr', [(pattern, 'ılar')])
        assert table.plural[0][0] is pattern

    def test_immutable(self):
        table = RuleTable('xx')
        with pytest.raises(AttributeError):
            table.language = 'yy'

        with pytest.raises(TypeError):
            table.irregular['foo'] = 'bar'

    @pytest.mark.parametrize('rules', [['abc'], [('a', 'b', 'c')], [1]])
    def test_invalid_rules(self, rules):
        with pytest.raises(InvalidArgument):
            RuleTable('xx', rules)

    def test_invalid_pattern(self):
        with pytest.raises(TypeError):
            RuleTable('xx', [(1, 'b')])

    def test_extend(self):
        table = RuleTable('xx', [('a$', 'b')], uncountable=['foo'])
        extended = table.extend(plural=[('c$', 'd')], uncountable=['bar'])

        assert extended is not table
        assert len(table.plural) == 1
        assert [pattern.pattern for pattern, _ in extended.plural] == ['a$', 'c$']
        assert extended.uncountable == {'foo', 'bar'}


# ---------------------------------------------------------------------------- #
class TestInflector:

    def test_countable(self):
        table = REGISTRY['en']
        assert Inflector('sheep', table).is_uncountable()
        assert Inflector('Sheep', table).is_uncountable()
        assert Inflector('cat', table).is_countable()

    def test_language(self):
        assert Inflector('cat', REGISTRY['fr']).language == 'fr'

    def test_no_rule_matches(self):
        table = RuleTable('xx', [('^a$', 'b')])
        assert Inflector('Word', table).pluralize() == 'word'

    def test_precedence(self):
        # uncountable beats irregular beats rules
        table = RuleTable('xx', [('$', 's')], [('s$', '')],
                          {'foo': 'fooz', 'bar': 'barz'}, ['bar'])
        assert Inflector('bar', table).pluralize() == 'bar'
        assert Inflector('foo', table).pluralize() == 'fooz'
        assert Inflector('fooz', table).singularize() == 'foo'
        assert Inflector('baz', table).pluralize() == 'bazs'


# ---------------------------------------------------------------------------- #
class TestRegistry:

    def test_default(self, registry):
        assert registry.languages == ('en', 'es', 'fr', 'nb', 'pt', 'tr')
        assert len(registry) == 6
        assert 'EN' in registry
        assert 'xx' not in registry
        assert list(registry) == list(registry.languages)

    @pytest.mark.parametrize('language', ['xx', 'english', ''])
    def test_unsupported_language(self, registry, language):
        with pytest.raises(UnsupportedLanguage) as info:
            registry.inflector('word', language)

        assert info.value.language == language
        assert isinstance(info.value, LookupError)

    def test_language_normalized(self, registry):
        assert registry.pluralize('cat', ' EN ') == 'cats'

    def test_register_table(self, registry):
        table = RuleTable('xx', [('$', 'z')])
        assert registry.register(table) is table
        assert registry.pluralize('word', 'xx') == 'wordz'

    def test_register_code(self, registry):
        table = registry.register('Xx', [('$', 'z')], [('z$', '')])
        assert table.language == 'xx'
        assert registry.singularize('wordz', 'xx') == 'word'

    def test_register_invalid(self, registry):
        with pytest.raises(TypeError):
            registry.register(object())

    def test_register_replaces(self, registry):
        registry.register(RuleTable('en', [('$', 'z')]))
        assert registry.pluralize('cat', 'en') == 'catz'
        # default process-wide registry unaffected
        assert REGISTRY.pluralize('cat', 'en') == 'cats'

    def test_add_uncountable(self, registry):
        registry.add_uncountable_rules('en', ['pokemon'])
        assert registry.pluralize('pokemon') == 'pokemon'
        assert registry.singularize('Pokemon') == 'pokemon'
        assert REGISTRY.pluralize('pokemon') == 'pokemons'

    def test_add_irregular(self, registry):
        registry.add_irregular_rules('en', {'cactus': 'cacti'})
        assert registry.pluralize('cactus') == 'cacti'
        assert registry.singularize('cacti') == 'cactus'

    def test_add_plural_rules_extends_coverage(self, registry):
        registry.add_plural_rules('tr', {'([ıuoa][^aoıueöiü]*)$': r'\1lar'})
        assert registry.pluralize('xyz', 'tr') == 'xyz'

        registry.add_plural_rules('tr', [('^xyz$', 'xyzler')])
        assert registry.pluralize('xyz', 'tr') == 'xyzler'

    def test_builtin_rules_take_precedence(self, registry):
        # built-in rules are checked before added ones, so an added rule can
        # only cover words that no built-in rule matches
        registry.add_plural_rules('en', {'(quiz)$': r'\1s'})
        assert registry.pluralize('quiz') == 'quizzes'

        registry.add_singular_rules('en', {'(cat)s$': r'\1z'})
        assert registry.singularize('cats') == 'cat'

    def test_add_rules_unsupported(self, registry):
        with pytest.raises(UnsupportedLanguage):
            registry.add_plural_rules('xx', {'$': 's'})

    def test_concurrent_updates(self, registry):
        words = [f'word{i}' for i in range(50)]

        def add(word):
            registry.add_uncountable_rules('en', [word])

        threads = [threading.Thread(target=add, args=(word, ))
                   for word in words]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # no update lost
        assert set(words) <= registry['en'].uncountable
        assert all(registry.pluralize(word) == word for word in words)
