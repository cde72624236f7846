# third-party
import pytest

# local
from inkwell import Text, create, s
from inkwell.errors import InvalidArgument, UnsupportedLanguage
from inkwell.inflection import Registry


# ---------------------------------------------------------------------------- #
STRING = 'hellö world'


@pytest.fixture
def text():
    return Text(STRING)


# ---------------------------------------------------------------------------- #
class TestCreate:

    def test_create(self):
        assert isinstance(Text.create(STRING), Text)
        assert isinstance(create(STRING), Text)
        assert s is create
        assert Text() == ''

    def test_str(self, text):
        assert isinstance(str(text), str)
        assert str(text) == STRING
        assert repr(text) == "Text('hellö world')"
        assert f'{text:>12}' == f'{STRING:>12}'

    def test_copy(self, text):
        assert Text(text) == text

    def test_bytes(self):
        assert Text(STRING.encode()) == STRING
        assert Text(STRING.encode('latin-1'), 'latin-1') == STRING
        assert bytes(Text(STRING)) == STRING.encode()

    def test_encoding(self, text):
        assert text.encoding == 'utf-8'
        other = text.with_encoding('latin-1')
        assert other.encoding == 'latin-1'
        assert other.encode() == STRING.encode('latin-1')
        assert text.upper_case().encoding == 'utf-8'
        assert other.upper_case().encoding == 'latin-1'

    def test_invalid_type(self):
        with pytest.raises(TypeError):
            Text(1)

    def test_create_from_list(self):
        result = Text.create_from_list([' hellö ', 'world\t'])
        assert result == STRING
        assert Text.create_from_list(['a', ' b '], ', ') == 'a, b'

    def test_equality(self, text):
        assert text == Text(STRING)
        assert text == STRING
        assert text != 'hello world'
        assert text != 1
        assert hash(text) == hash(Text(STRING))
        assert len({text, Text(STRING)}) == 1

    def test_immutable(self, text):
        with pytest.raises(AttributeError):
            text._string = 'other'

        text.upper_case()
        text.replace('l', 'w')
        assert text == STRING

    def test_dunders(self, text):
        assert len(text) == 11
        assert 'ö w' in text
        assert '' not in text
        assert (text + '!') == 'hellö world!'
        assert [*Text('ab')] == ['a', 'b']


# ---------------------------------------------------------------------------- #
class TestManipulate:

    def test_after(self, text):
        assert text.after('ö') == ' world'
        assert text.after('x') == STRING
        assert text.after('') == STRING

    def test_before(self, text):
        assert text.before('ö') == 'hell'
        assert text.before('x') == STRING
        assert text.before('') == STRING

    def test_prepend(self, text):
        assert text.prepend('¡') == '¡hellö world'
        assert text.prepend('say', ': ') == 'say: hellö world'

    def test_append(self, text):
        assert text.append('!') == 'hellö world!'
        assert text.append('again', ' ') == 'hellö world again'

    def test_start_with(self, text):
        assert text.start_with('123á') == '123áhellö world'
        assert Text('123á123áx').start_with('123á') == '123áx'

    def test_finish_with(self, text):
        assert text.finish_with('123á') == 'hellö world123á'
        assert Text('x//').finish_with('/') == 'x/'

    def test_limit_characters(self, text):
        assert text.limit_characters(6) == 'hellö…'
        assert text.limit_characters(11) == STRING
        assert text.limit_characters(8, '...') == 'hellö...'
        # trailing whitespace trimmed before the suffix
        assert text.limit_characters(7) == 'hellö…'

    def test_limit_characters_wide(self):
        # wide characters count double
        assert Text('日本語テキスト').limit_characters(7) == '日本語…'

    def test_limit_words(self, text):
        assert text.limit_words(1) == 'hellö…'
        assert text.limit_words(2) == STRING
        assert text.limit_words(1, '!') == 'hellö!'
        assert Text('  hellö  ').limit_words(1) == '  hellö  '

    def test_replace(self, text):
        assert text.replace('hellö', 'göödbye') == 'göödbye world'
        assert text.replace('l', 'L', 2) == 'heLLö world'

    def test_replace_first(self, text):
        assert text.replace_first('l', 'w') == 'hewlö world'
        assert text.replace_first('x', 'w') == STRING
        assert text.replace_first('', 'w') == STRING

    def test_replace_last(self, text):
        assert text.replace_last('l', 'w') == 'hellö worwd'
        assert text.replace_last('x', 'w') == STRING

    def test_replace_sub(self, text):
        assert text.replace_sub('💩', 0, 2) == '💩llö world'
        assert text.replace_sub('!', -5) == 'hellö !'
        assert text.replace_sub('!', 5, 0) == 'hellö! world'

    def test_remove(self, text):
        assert text.remove('ö') == 'hell world'
        assert text.remove('l', 1) == 'helö world'

    def test_remove_first(self, text):
        assert text.remove_first('l') == 'helö world'

    def test_remove_last(self, text):
        assert text.remove_last('l') == 'hellö word'

    def test_slug(self, text):
        assert text.slug() == 'hello-world'
        assert text.slug('_') == 'hello_world'

    def test_chunk(self, text):
        assert text.chunk(2) == ['he', 'll', 'ö ', 'wo', 'rl', 'd']
        assert text.chunk() == list(STRING)
        assert text.chunk(20) == [STRING]
        assert Text().chunk(3) == ['']
        assert all(isinstance(part, Text) for part in text.chunk(3))

    @pytest.mark.parametrize('size', [0, -1])
    def test_chunk_invalid(self, text, size):
        with pytest.raises(InvalidArgument):
            text.chunk(size)

    def test_split_words(self, text):
        assert text.split_words() == ['hellö', 'world']
        assert Text("it's 2 o'clock").split_words() == ['it', 's', 'o', 'clock']
        assert Text('  ').split_words() == []

    def test_first_last_word(self, text):
        assert text.first_word() == 'hellö'
        assert text.last_word() == 'world'
        assert Text('123').first_word() == ''
        assert Text('123').last_word() == ''

    def test_slice(self, text):
        assert text.slice(1, 9) == 'ellö worl'
        assert text.slice(6) == 'world'
        assert text.slice(-5) == 'world'
        assert text.slice(0, -6) == 'hellö'
        assert text.slice(20) == ''

    def test_trim(self, text):
        assert Text(f'\n {STRING}\t ').trim() == STRING
        assert Text(f'\n {STRING}\t ').ltrim() == f'{STRING}\t '
        assert Text(f'\n {STRING}\t ').rtrim() == f'\n {STRING}'
        assert Text('--x--').trim('-') == 'x'

    def test_base64encode(self):
        assert Text('hello world').base64encode() == 'aGVsbG8gd29ybGQ='


# ---------------------------------------------------------------------------- #
class TestQuery:

    def test_contains(self, text):
        assert text.contains('hellö')
        assert not text.contains('hello')
        assert not text.contains('')

    def test_starts_with(self, text):
        assert text.starts_with('hellö')
        assert not text.starts_with('hello')
        assert not text.starts_with('')

    def test_ends_with(self, text):
        assert text.ends_with('ö world')
        assert not text.ends_with('o world')
        assert not text.ends_with('')

    def test_matches(self, text):
        assert text.matches('*ö world')
        assert not text.matches('*o world')
        assert text.matches(STRING)
        assert text.matches('h*o*d')
        assert not text.matches('hellö')
        assert Text('a.b').matches('a.b')
        assert not Text('axb').matches('a.b')

    def test_length(self, text):
        assert isinstance(text.length(), int)
        assert text.length() == 11


# ---------------------------------------------------------------------------- #
class TestCasing:

    def test_lower(self):
        assert Text('HELLÖ WORLD').lower_case() == STRING
        assert Text('HELLÖ WORLD').lower_case_first() == 'hELLÖ WORLD'
        assert Text('HELLÖ WORLD').lower_case_words() == 'hELLÖ wORLD'

    def test_upper(self, text):
        assert text.upper_case() == 'HELLÖ WORLD'
        assert text.upper_case_first() == 'Hellö world'
        assert text.upper_case_words() == 'Hellö World'

    def test_title_case(self, text):
        assert text.title_case() == 'Hellö World'
        assert Text('i like to watch DVDs at home').title_case(['watch']) == \
            'I Like to watch DVDs at Home'
        assert Text('i like to watch DVDs at home').title_case('watch') == \
            'I Like to watch DVDs at Home'
        assert Text('a tale of two cities').title_case(['']) == \
            'A Tale of Two Cities'

    def test_conversions(self, text):
        assert text.camel_case() == 'hellöWorld'
        assert text.studly_case() == 'HellöWorld'
        assert text.snake_case() == 'hellö_world'
        assert text.snake_case('.') == 'hellö.world'
        assert text.kebab_case() == 'hellö-world'


# ---------------------------------------------------------------------------- #
class TestInflection:

    def test_plural(self):
        assert Text('person').plural() == 'people'
        assert Text('person').plural(1) == 'person'
        assert Text('people').plural(1) == 'person'
        assert Text('person').plural(0) == 'people'
        assert Text('ratón').plural(2, 'es') == 'ratones'

    def test_pluralize(self):
        assert Text('Mouse').pluralize() == 'mice'
        assert Text('cheval').pluralize('fr') == 'chevaux'

    def test_singularize(self):
        assert Text('mice').singularize() == 'mouse'
        assert Text('mice').singular() == 'mouse'
        assert Text('chevaux').singularize('fr') == 'cheval'

    def test_registry(self):
        registry = Registry.default()
        registry.add_uncountable_rules('en', 'pokemon')
        assert Text('pokemon').pluralize(registry=registry) == 'pokemon'
        assert Text('pokemon').pluralize() == 'pokemons'

    def test_empty_registry(self):
        with pytest.raises(UnsupportedLanguage):
            Text('cat').pluralize('en', registry=Registry())


# ---------------------------------------------------------------------------- #
class TestFormat:

    def test_ascii(self, text):
        assert text.ascii() == 'hello world'
        assert text.ascii('de') == 'helloe world'

    def test_sprintf(self):
        result = Text.sprintf('%s, %5.1f%%', 'hellö', 99.44)
        assert isinstance(result, Text)
        assert result == 'hellö,  99.4%'

    def test_vsprintf(self):
        assert Text.vsprintf('%-6s|', ['hellö']) == 'hellö |'
        assert Text.vsprintf(b'%s', [STRING.encode()]) == STRING
