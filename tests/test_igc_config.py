"""
Tests for igc_config.py configuration handling
"""
import pytest
from igc_config import Config, ConfigParser
from igc_model import ExtensionStat


class TestConfigParser:
    """Tests for ConfigParser"""

    def test_find_config_file_from_cli(self, sample_config_file):
        parser = ConfigParser()
        assert parser.find_config_file(str(sample_config_file)) == str(sample_config_file)

    def test_find_config_file_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / 'igc2kml.conf').write_text('[Defaults]\n')
        monkeypatch.chdir(tmp_path)
        found = ConfigParser().find_config_file(None)
        assert found is not None
        assert found.endswith('igc2kml.conf')

    def test_load_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        parser = ConfigParser()
        assert not parser.load_config_file(str(tmp_path / 'missing.conf'))
        assert parser.get_default_settings() == {}

    def test_default_settings_are_lower_case(self, sample_config_file):
        parser = ConfigParser()
        assert parser.load_config_file(str(sample_config_file))
        defaults = parser.get_default_settings()
        assert defaults['encoding'] == 'ISO-8859-1'
        assert defaults['extrude'] == 'yes'

    def test_parse_stat_config(self):
        assert ConfigParser.parse_stat_config('Vmax', 'Max. vario, m/s') == ExtensionStat('Max. vario', 'm/s')

    @pytest.mark.parametrize('value', ['no unit', ', m/s'])
    def test_parse_stat_config_invalid(self, value):
        with pytest.raises(ValueError):
            ConfigParser.parse_stat_config('Vmax', value)

    def test_extension_settings(self, sample_config_file):
        parser = ConfigParser()
        parser.load_config_file(str(sample_config_file))
        table = parser.get_extension_settings()
        assert set(table) == {'FLY', 'XSX'}
        assert table['FLY']['Vmax'] == ExtensionStat('Max. vario', 'm/s')
        assert table['FLY']['Alt'] == ExtensionStat('Max. altitude', 'm')

    def test_invalid_statistic_is_skipped(self, tmp_path):
        config_file = tmp_path / 'bad.conf'
        config_file.write_text('[Extensions FLY]\nVmax = no unit\nAlt = Max. altitude, m\n')
        parser = ConfigParser()
        parser.load_config_file(str(config_file))
        assert set(parser.get_extension_settings()['FLY']) == {'Alt'}


class TestConfig:
    """Tests for the main Config class"""

    def test_values_from_config_file(self, mock_cli_args):
        config = Config(mock_cli_args)
        assert config.encoding == 'ISO-8859-1'
        assert config.clamp is False
        assert config.extrude is True
        assert config.gps is True

    def test_cli_overrides(self, mock_cli_args):
        mock_cli_args.encoding = 'UTF-8'
        mock_cli_args.clamp = True
        config = Config(mock_cli_args)
        assert config.encoding == 'UTF-8'
        assert config.clamp is True

    def test_out_path_from_cli(self, mock_cli_args, temp_output_dir):
        config = Config(mock_cli_args)
        assert config.outPath == str(temp_output_dir)

    def test_defaults_without_config_file(self, mock_cli_args, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        mock_cli_args.config = None
        mock_cli_args.destination = None
        config = Config(mock_cli_args)
        assert config.encoding == 'ISO-8859-1'
        assert config.outPath is None
        assert (config.clamp, config.extrude, config.gps) == (False, False, False)

    def test_invalid_flag_keeps_default(self, mock_cli_args, tmp_path):
        config_file = tmp_path / 'flags.conf'
        config_file.write_text('[Defaults]\nClamp = sometimes\n')
        mock_cli_args.config = str(config_file)
        assert Config(mock_cli_args).clamp is False

    def test_extension_table_merges_builtin(self, mock_cli_args):
        table = Config(mock_cli_args).extension_table()
        # configured entry overrides the built-in label
        assert table['XSX']['MC'] == ExtensionStat('Best climb', 'm/s')
        # built-in entries remain
        assert table['XSX']['Dist'].unit == 'km'
        assert table['FLY']['Vmax'].label == 'Max. vario'

    def test_manufacturers(self, mock_cli_args):
        assert Config(mock_cli_args).manufacturers() == ['FLY', 'XSX']
