"""
Pytest configuration and shared fixtures for igc2kml tests
"""
import pytest

from igc_model import DeviceInfo, DateInfo, HeaderEntry, ExtensionEntry, FixRecord


@pytest.fixture
def sample_igc_content():
    """Sample IGC file content for testing"""
    return """AXSXABC XCSoar Vario
HFDTE120723
HFPLTPILOTINCHARGE:Jane Pilot
HFCIDCOMPETITIONID:JP
HFGTYGLIDERTYPE:Advance Sigma 10
HFGIDGLIDERID:
HFCCLCOMPETITIONCLASS:Sport
HFSITSITE:Lakeside
LXSXMC:3.5 MS:-1.2 MSP:45.0 Dist:120.3
B1012304730123N00805990EA0090200915
B1012354730140N00806010EA0091000921
B1012404730160N00806030EA0091500930
"""


@pytest.fixture
def sample_igc_file(tmp_path, sample_igc_content):
    """Create a temporary IGC file for testing"""
    igc_file = tmp_path / "test_flight.igc"
    igc_file.write_text(sample_igc_content, encoding='ISO-8859-1')
    return igc_file


@pytest.fixture
def sample_config_content():
    """Sample configuration file content"""
    return """[Defaults]
Encoding = ISO-8859-1
Clamp = no
Extrude = yes
Gps = on

[Extensions FLY]
Vmax = Max. vario, m/s
Alt = Max. altitude, m

[Extensions XSX]
MC = Best climb, m/s
"""


@pytest.fixture
def sample_config_file(tmp_path, sample_config_content):
    """Create a temporary config file for testing"""
    config_file = tmp_path / "test_config.conf"
    config_file.write_text(sample_config_content)
    return config_file


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create a temporary output directory"""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def mock_cli_args(sample_config_file, temp_output_dir):
    """Mock command-line arguments for testing"""
    class MockArgs:
        def __init__(self):
            self.config = str(sample_config_file)
            self.destination = str(temp_output_dir)
            self.encoding = None
            self.clamp = False
            self.extrude = False
            self.gps = False
            self.stdout = False
            self.verbose = False
            self.trackfile = []

    return MockArgs()


class StubRecordSource:
    """In-memory record source with the same accessors as IgcRecordParser"""

    def __init__(self, device=None, date_info=None, headers=(), extensions=(), fixes=(), ready=True):
        self.device = device or DeviceInfo('XSX', 'ABC', 'XCSoar Vario')
        self.date = date_info or DateInfo('12', '07', '23')
        self.headers = tuple(headers)
        self.extensions = tuple(extensions)
        self.fixes = tuple(fixes)
        self.is_ready = ready

    def ready(self):
        return self.is_ready

    def device_info(self):
        return self.device

    def date_info(self):
        return self.date

    def header_entries(self):
        return self.headers

    def extension_entries(self):
        return self.extensions

    def fix_records(self):
        return self.fixes


@pytest.fixture
def sample_fixes():
    """Three fixes with distinct pressure and GPS altitudes"""
    return [
        FixRecord(10, 12, 30, '4730123', 'N', '00805990', 'E', 902.0, 915.0),
        FixRecord(10, 12, 35, '4730140', 'N', '00806010', 'E', 910.0, 921.0),
        FixRecord(10, 12, 40, '4730160', 'N', '00806030', 'E', 915.0, 930.0),
    ]


@pytest.fixture
def stub_source(sample_fixes):
    """A ready record source with headers and XSX statistics"""
    return StubRecordSource(
        headers=[
            HeaderEntry('PLT', 'Jane Pilot'),
            HeaderEntry('GID', '   '),
            HeaderEntry('SIT', 'Lakeside'),
        ],
        extensions=[ExtensionEntry('XSX', 'MC:3.5 MS:-1.2 MSP:45.0 Dist:120.3')],
        fixes=sample_fixes
    )
