import logging
from io import StringIO

import pytest

from scopeconf import (
    ConfigFile,
    ConfigSourceError,
    FileSource,
    LineSource,
    LoadState,
    TextSource,
)
from scopeconf.consts import ERR_UNKNOWN_IO


def test_text_source_strips_newlines():
    assert TextSource('a = 1\r\nb = 2\n\nc').read() == [
        'a = 1', 'b = 2', '', 'c']
    assert TextSource(StringIO('x\ny\n')).read() == ['x', 'y']
    assert TextSource('').read() == []


def test_file_source_reads_lines(tmp_path):
    path = tmp_path / 'a.conf'
    path.write_text('a = 1\n# c\nb = 2\n', encoding='utf-8')
    assert FileSource(path, 'utf-8').read() == ['a = 1', '# c', 'b = 2']
    assert str(FileSource(path, 'utf-8')).endswith('a.conf (utf-8)')


def test_file_source_missing(tmp_path, caplog):
    source = FileSource(tmp_path / 'missing.conf')
    with caplog.at_level(logging.WARNING, logger='scopeconf.sources'):
        with pytest.raises(ConfigSourceError):
            source.read()
    assert 'missing.conf' in caplog.text


def test_file_source_directory(tmp_path):
    with pytest.raises(ConfigSourceError):
        FileSource(tmp_path).read()


def test_source_error_is_os_error(tmp_path):
    with pytest.raises(OSError):
        FileSource(tmp_path / 'nope').read()


def test_wrong_encoding_falls_back_to_detection(tmp_path):
    text = 'greeting = "Grüße aus Köln, schöne Grüße"\n' * 20
    path = tmp_path / 'latin.conf'
    path.write_bytes(text.encode('latin-1'))
    cf = ConfigFile(path, encoding='utf-8')
    assert cf.load(), cf.errors()
    assert cf.get('greeting').startswith('Gr')
    assert cf.get_array('greeting')[0].endswith('e')
    assert len(cf.get_array('greeting')) == 20


def test_decode_file_fallback(tmp_path):
    path = tmp_path / 'utf8.conf'
    path.write_bytes('名前 = 値\n'.encode('utf-8'))
    assert FileSource._decode_file(str(path)).read() == '名前 = 値\n'


def test_custom_line_source():
    class ListSource(LineSource):
        def __init__(self, lines):
            self._lines = lines

        def read(self):
            return list(self._lines)

        def __str__(self):
            return '<list>'

    cf = ConfigFile(ListSource(['[a]', 'b = 1']))
    assert cf.load()
    assert cf.get('a.b') == '1'


def test_failed_load_is_logged(caplog):
    cf = ConfigFile.from_string('bad name = 1\n')
    with caplog.at_level(logging.WARNING, logger='scopeconf.model'):
        assert not cf.load()
    assert '1 parse error' in caplog.text


def test_unknown_encoding_fails_load(tmp_path):
    path = tmp_path / 'a.conf'
    path.write_text('a = 1\n', encoding='utf-8')
    with pytest.raises(ConfigSourceError):
        FileSource(path, 'no-such-codec').read()

    cf = ConfigFile(path, encoding='no-such-codec')
    assert not cf.load()
    assert cf.state is LoadState.FAILED
    assert cf.errors() == [ERR_UNKNOWN_IO]


def test_decode_fallback_error_fails_load(tmp_path, monkeypatch):
    path = tmp_path / 'latin.conf'
    path.write_bytes('name = Köln\n'.encode('latin-1'))

    def broken(filename):
        raise PermissionError(filename)

    monkeypatch.setattr(FileSource, '_decode_file', staticmethod(broken))
    with pytest.raises(ConfigSourceError):
        FileSource(path, 'utf-8').read()

    cf = ConfigFile(path, encoding='utf-8')
    assert not cf.load()
    assert cf.state is LoadState.FAILED
    assert cf.errors() == [ERR_UNKNOWN_IO]


def test_closed_stream_fails_load(caplog):
    buf = StringIO('a = 1\n')
    buf.close()
    cf = ConfigFile(TextSource(buf))
    with caplog.at_level(logging.WARNING, logger='scopeconf.model'):
        assert not cf.load()
    assert cf.state is LoadState.FAILED
    assert cf.errors() == [ERR_UNKNOWN_IO]
    assert 'closed file' in caplog.text
    # not stuck mid-load
    cf.override_quote_character("'")
    assert cf.syntax.quote == "'"
    assert not cf.load()
    assert len(cf.errors()) == 1
