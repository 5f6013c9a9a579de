"""
Unit tests for file path extraction.
"""

from voice_nlp.interpreter.extractors import extract_file_paths


class TestFilePathExtraction:
    """Test the three path families and deduplication."""

    def test_absolute_and_relative(self):
        """Each path appears exactly once even when several patterns match it."""
        paths = extract_file_paths("open /usr/local/bin/app and ./config.json")

        assert paths.count('/usr/local/bin/app') == 1
        assert paths.count('./config.json') == 1
        assert paths == ['/usr/local/bin/app', './config.json', 'config.json']

    def test_bare_file_name(self):
        assert extract_file_paths("red the file server.js") == ['server.js']

    def test_duplicates_removed(self):
        assert extract_file_paths("open server.js then close server.js") == ['server.js']

    def test_parent_relative(self):
        assert extract_file_paths("look in ../lib/util.py") == ['../lib/util.py', 'util.py']

    def test_order_of_appearance(self):
        paths = extract_file_paths("copy notes.txt to /tmp/backup")
        assert paths == ['notes.txt', '/tmp/backup']

    def test_trailing_punctuation_trimmed(self):
        assert extract_file_paths("check /etc/hosts.") == ['/etc/hosts']

    def test_punctuation_before_full_stop_trimmed(self):
        assert extract_file_paths("(see /etc/hosts).") == ['/etc/hosts']

    def test_parent_hops_kept(self):
        """Dot segments are part of the path, not sentence punctuation."""
        assert extract_file_paths("cd ../.. now") == ['../..']

    def test_current_dir_segment_kept(self):
        assert extract_file_paths("go to ./src/.") == ['./src/.']

    def test_dot_segment_before_comma_kept(self):
        assert extract_file_paths("open /var/log/.., then list it") == ['/var/log/..']

    def test_only_one_full_stop_trimmed(self):
        assert extract_file_paths("open ../notes..") == ['../notes.']

    def test_casing_preserved(self):
        assert extract_file_paths("open README.md") == ['README.md']

    def test_version_numbers_ignored(self):
        assert extract_file_paths("python 3.11 is out") == []

    def test_url_scheme_slashes_ignored(self):
        """'//' is not an absolute path on its own."""
        assert '/' not in extract_file_paths("see http://")

    def test_no_paths(self):
        assert extract_file_paths("the quick brown fox jumps") == []

    def test_empty(self):
        assert extract_file_paths("") == []


# Run tests with: pytest tests/test_interpreter/test_extractors.py -v
