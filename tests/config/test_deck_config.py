import pytest
import tempfile
import shutil
from pathlib import Path

import toml

from deckmd.config.settings import DeckConfig
from deckmd.errors import InvalidConfigError


class TestDeckConfig:
    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)
        self.config_path = self.root / '.pm' / 'deck.toml'

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def write_config(self, text):
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(text, encoding='utf-8')

    def test_default_layout(self):
        """Test the conventional paths under the project root."""
        config = DeckConfig.default(self.root)
        assert config.deck_dir == self.root / '.pm' / 'deck'
        assert config.overview_file == self.root / '.pm' / 'pm.md'
        assert config.output_file == self.root / 'DECK.md'
        assert config.verbose is False

    def test_load_without_file_uses_defaults(self):
        """Test that a missing config file is not an error."""
        assert DeckConfig.load(self.root) == DeckConfig.default(self.root)

    def test_load_partial_file(self):
        """Test that unset keys keep their defaults."""
        self.write_config('[deck]\noutput_file = "docs/BOARD.md"\nverbose = true\n')
        config = DeckConfig.load(self.root)
        assert config.output_file == self.root / 'docs' / 'BOARD.md'
        assert config.deck_dir == self.root / '.pm' / 'deck'
        assert config.verbose is True

    def test_load_explicit_path(self):
        """Test loading from a config file outside .pm."""
        other = self.root / 'deck-settings.toml'
        other.write_text('[deck]\ndeck_dir = "boards"\n', encoding='utf-8')
        config = DeckConfig.load(self.root, other)
        assert config.deck_dir == self.root / 'boards'

    def test_absolute_paths_are_kept(self):
        """Test that absolute paths are not joined to the root."""
        target = self.root / 'elsewhere' / 'out.md'
        config = DeckConfig.from_dict(self.root, {'deck': {'output_file': str(target)}})
        assert config.output_file == target

    def test_empty_table(self):
        assert DeckConfig.from_dict(self.root, {}) == DeckConfig.default(self.root)

    def test_invalid_toml(self):
        """Test that unparsable TOML raises InvalidConfigError."""
        self.write_config('[deck\noutput_file = ')
        with pytest.raises(InvalidConfigError):
            DeckConfig.load(self.root)

    def test_unknown_key(self):
        with pytest.raises(InvalidConfigError, match='deck.colour'):
            DeckConfig.from_dict(self.root, {'deck': {'colour': 'blue'}})

    @pytest.mark.parametrize('data', [
        {'deck': {'deck_dir': ''}},
        {'deck': {'output_file': 3}},
        {'deck': {'verbose': 'yes'}},
        {'deck': 'not a table'},
    ])
    def test_invalid_values(self, data):
        """Test settings validation."""
        with pytest.raises(InvalidConfigError):
            DeckConfig.from_dict(self.root, data)

    def test_to_dict(self):
        """Test that paths are stored relative to the root."""
        data = DeckConfig.default(self.root).to_dict()
        assert data == {
            'deck': {
                'deck_dir': '.pm/deck',
                'overview_file': '.pm/pm.md',
                'output_file': 'DECK.md',
                'verbose': False,
            }
        }

    def test_save_and_load(self):
        """Test saving and loading configuration."""
        config = DeckConfig.default(self.root).with_overrides(output_file='out/DECK.md', verbose=True)
        written = config.save()
        assert written == self.config_path

        parsed = toml.loads(self.config_path.read_text(encoding='utf-8'))
        assert parsed['deck']['output_file'] == 'out/DECK.md'

        loaded = DeckConfig.load(self.root)
        assert loaded == config

    def test_with_overrides(self):
        """Test that CLI style overrides resolve against the root."""
        config = DeckConfig.default(self.root)
        updated = config.with_overrides(deck_dir='cards', overview_file=None, verbose=True)
        assert updated.deck_dir == self.root / 'cards'
        assert updated.overview_file == config.overview_file
        assert updated.verbose is True
        # original untouched
        assert config.deck_dir == self.root / '.pm' / 'deck'
        assert config.verbose is False
