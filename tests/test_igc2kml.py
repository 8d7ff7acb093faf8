"""
Integration tests for igc2kml.py main script
End-to-end testing of the complete conversion pipeline
"""
import pytest
from igc2kml import build_arg_parser, main, process_file, process_files
from igc_config import Config


class TestArgParser:

    def test_defaults(self):
        args = build_arg_parser().parse_args(['flight.igc'])
        assert args.trackfile == ['flight.igc']
        assert not args.clamp and not args.extrude and not args.gps
        assert args.destination is None

    def test_options(self):
        args = build_arg_parser().parse_args(['--clamp', '--extrude', '--gps', '-d', 'out', '-e', 'UTF-8', 'a.igc', 'b.igc'])
        assert args.clamp and args.extrude and args.gps
        assert args.destination == 'out'
        assert args.encoding == 'UTF-8'
        assert args.trackfile == ['a.igc', 'b.igc']

    def test_track_file_required(self):
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])


class TestProcessFile:
    """Tests for process_file function"""

    def test_process_single_igc_file(self, sample_igc_file, mock_cli_args, temp_output_dir):
        config = Config(mock_cli_args)

        assert process_file(config, str(sample_igc_file))

        expected_output = temp_output_dir / "test_flight.kml"
        assert expected_output.exists()
        content = expected_output.read_text(encoding='utf-8')
        assert '<gx:Track>' in content
        assert 'Flight from Lakeside on 12.07.23' in content
        # config file enables extrude and GPS altitude
        assert '<extrude>1</extrude>' in content
        assert ' 915.0</gx:coord>' in content

    def test_process_to_stdout(self, sample_igc_file, mock_cli_args, temp_output_dir, capsys):
        config = Config(mock_cli_args)

        assert process_file(config, str(sample_igc_file), stdout=True)

        assert '<kml' in capsys.readouterr().out
        assert not list(temp_output_dir.glob("*.kml"))

    def test_process_nonexistent_file(self, mock_cli_args):
        config = Config(mock_cli_args)
        assert not process_file(config, "/nonexistent/file.igc")

    def test_process_invalid_file(self, tmp_path, mock_cli_args):
        invalid_file = tmp_path / "not_igc.txt"
        invalid_file.write_text("This is not an IGC file\nJust some random text\n")
        config = Config(mock_cli_args)
        assert not process_file(config, str(invalid_file))


class TestProcessFiles:
    """Tests for process_files function (batch processing)"""

    def test_process_multiple_files(self, tmp_path, mock_cli_args, sample_igc_content, temp_output_dir):
        paths = []
        for name in ("flight1.igc", "flight2.igc", "flight3.igc"):
            igc_file = tmp_path / name
            igc_file.write_text(sample_igc_content)
            paths.append(str(igc_file))

        config = Config(mock_cli_args)
        assert process_files(config, paths) == 0

        output_names = {f.name for f in temp_output_dir.glob("*.kml")}
        assert output_names == {"flight1.kml", "flight2.kml", "flight3.kml"}

    def test_failures_are_counted(self, sample_igc_file, mock_cli_args):
        config = Config(mock_cli_args)
        assert process_files(config, [str(sample_igc_file), "/nonexistent/file.igc"]) == 1

    def test_process_no_files(self, mock_cli_args):
        assert process_files(Config(mock_cli_args), []) == 0


class TestMain:

    def test_main_success(self, sample_igc_file, sample_config_file, temp_output_dir):
        code = main(['-c', str(sample_config_file), '-d', str(temp_output_dir), '--clamp', str(sample_igc_file)])
        assert code == 0
        content = (temp_output_dir / 'test_flight.kml').read_text(encoding='utf-8')
        assert '<altitudeMode>clampToGround</altitudeMode>' in content

    def test_main_failure(self, sample_config_file, tmp_path):
        code = main(['-c', str(sample_config_file), str(tmp_path / 'missing.igc')])
        assert code == 1
