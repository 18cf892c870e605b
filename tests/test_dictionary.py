import tempfile
import unittest
import urllib.error
from pathlib import Path
from unittest import mock

from wordpuzzle.dictionary import Dictionary, load_dictionary, read_words, is_url, DEFAULT_URL

RAW = "Cat\n  dog \n\nDon't\ncafé\nemu\r\nX1\n"


def fake_response(body, status=200):
    resp = mock.MagicMock()
    resp.status = status
    resp.read.return_value = body
    cm = mock.MagicMock()
    cm.__enter__.return_value = resp
    return cm


class TestReadWords(unittest.TestCase):
    def test_normalizes_and_keeps_order(self):
        self.assertEqual(read_words(RAW.splitlines()), ('cat', 'dog', 'emu'))

    def test_empty(self):
        self.assertEqual(read_words([]), ())
        self.assertEqual(read_words(['', '   ']), ())


class TestIsUrl(unittest.TestCase):
    def test_urls(self):
        self.assertTrue(is_url(DEFAULT_URL))
        self.assertTrue(is_url('http://example.com/words.txt'))

    def test_paths(self):
        self.assertFalse(is_url('words.txt'))
        self.assertFalse(is_url(Path('words.txt')))


class TestLoadFile(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / 'words.txt'
        self.path.write_text(RAW, encoding='utf-8')

    def tearDown(self):
        self.tmp.cleanup()

    def test_load(self):
        d = load_dictionary(self.path)
        self.assertFalse(d.failed)
        self.assertEqual(d.words, ('cat', 'dog', 'emu'))
        self.assertEqual(d.length, 3)
        self.assertEqual(len(d), 3)
        self.assertEqual(list(d), ['cat', 'dog', 'emu'])

    def test_str_path(self):
        d = Dictionary.load(str(self.path))
        self.assertEqual(d.words, ('cat', 'dog', 'emu'))

    def test_missing_file_sets_failed(self):
        with self.assertLogs(level='ERROR'):
            d = Dictionary.load(Path(self.tmp.name) / 'nope.txt')
        self.assertTrue(d.failed)
        self.assertEqual(d.words, ())

    def test_undecodable_line_is_dropped(self):
        self.path.write_bytes(b'cat\ncaf\xe9\n')
        d = load_dictionary(self.path)
        self.assertEqual(d.words, ('cat',))

    def test_words_are_immutable(self):
        d = load_dictionary(self.path)
        self.assertIsInstance(d.words, tuple)


class TestLoadUrl(unittest.TestCase):
    URL = 'https://example.com/words.txt'

    @mock.patch('urllib.request.urlopen')
    def test_fetch(self, urlopen):
        urlopen.return_value = fake_response(RAW.encode('utf-8'))
        d = load_dictionary(self.URL)
        self.assertFalse(d.failed)
        self.assertEqual(d.words, ('cat', 'dog', 'emu'))
        self.assertEqual(urlopen.call_count, 1)

    @mock.patch('urllib.request.urlopen')
    def test_undecodable_line_is_dropped(self, urlopen):
        urlopen.return_value = fake_response(b'cat\ncaf\xe9\n')
        d = load_dictionary(self.URL)
        self.assertFalse(d.failed)
        self.assertEqual(d.words, ('cat',))

    @mock.patch('urllib.request.urlopen')
    def test_network_error(self, urlopen):
        urlopen.side_effect = urllib.error.URLError('no route to host')
        with self.assertLogs(level='ERROR'):
            d = load_dictionary(self.URL)
        self.assertTrue(d.failed)
        self.assertEqual(d.words, ())

    @mock.patch('urllib.request.urlopen')
    def test_bad_status(self, urlopen):
        urlopen.return_value = fake_response(b'', status=204)
        with self.assertLogs(level='ERROR'):
            d = load_dictionary(self.URL)
        self.assertTrue(d.failed)

    @mock.patch('urllib.request.urlopen')
    def test_http_error(self, urlopen):
        urlopen.side_effect = urllib.error.HTTPError(self.URL, 404, 'Not Found', None, None)
        with self.assertLogs(level='ERROR'):
            d = load_dictionary(self.URL)
        self.assertTrue(d.failed)


class TestEmptyDictionary(unittest.TestCase):
    def test_empty_is_not_failed(self):
        d = Dictionary()
        self.assertFalse(d.failed)
        self.assertEqual(d.length, 0)


if __name__ == '__main__':
    unittest.main()
