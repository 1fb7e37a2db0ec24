"""Tests for the buffer module."""

from metaphone3.buffer import KeyBuffer


class TestKeyBuffer:
    """Tests for KeyBuffer."""

    def test_add_both(self):
        """Test appending to both channels."""
        buffer = KeyBuffer()
        buffer.add("K", "K")
        buffer.add("X", "S")
        assert buffer.primary == "KX"
        assert buffer.secondary == "KS"

    def test_skip_channel(self):
        """Test None and "" leave a channel alone."""
        buffer = KeyBuffer()
        buffer.add("K", None)
        buffer.add("", "F")
        assert buffer.primary == "K"
        assert buffer.secondary == "F"

    def test_no_repeated_vowel_marker(self):
        """Test 'A' is not appended after an 'A'."""
        buffer = KeyBuffer()
        buffer.add("A", "A")
        buffer.add("A", "A")
        buffer.add("K", "K")
        buffer.add("A", "A")
        assert buffer.primary == "AKA"

    def test_multi_symbol_ending_in_vowel(self):
        """Test only a lone 'A' is collapsed."""
        buffer = KeyBuffer()
        buffer.add("A", "A")
        buffer.add("AL", "AL")
        assert buffer.primary == "AAL"

    def test_result_truncates(self):
        """Test result cuts both channels."""
        buffer = KeyBuffer()
        buffer.add("SM0", "XMT")
        assert buffer.result(2) == ("SM", "XM")

    def test_result_collapses_equal(self):
        """Test an equal secondary comes back empty."""
        buffer = KeyBuffer()
        buffer.add("XMT", "XMT")
        assert buffer.result(8) == ("XMT", "")

    def test_both_full(self):
        """Test both_full needs both channels at the limit."""
        buffer = KeyBuffer()
        buffer.add("KK", "K")
        assert not buffer.both_full(2)
        buffer.add(None, "K")
        assert buffer.both_full(2)

    def test_reset(self):
        """Test reset empties both channels."""
        buffer = KeyBuffer()
        buffer.add("K", "S")
        buffer.reset()
        assert buffer.primary == ""
        assert buffer.secondary == ""
        assert len(buffer) == 0

    def test_last_primary(self):
        """Test last_primary."""
        buffer = KeyBuffer()
        assert buffer.last_primary() is None
        buffer.add("TS", "S")
        assert buffer.last_primary() == "S"

    def test_on_append(self):
        """Test the append hook sees only appended symbols."""
        seen = []
        buffer = KeyBuffer()
        buffer.on_append = lambda channel, symbol: seen.append((channel, symbol))
        buffer.add("A", "A")
        buffer.add("A", "X")
        assert seen == [("primary", "A"), ("secondary", "A"), ("secondary", "X")]

    def test_repr(self):
        """Test KeyBuffer string representation."""
        buffer = KeyBuffer()
        buffer.add("K", "S")
        assert "'K'" in repr(buffer)
