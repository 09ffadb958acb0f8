import json
import platform
import sys

from powervs_csi.version import VersionInfo, get_version, get_version_json


def _runtime_platform():
    return f"{sys.platform}/{platform.machine()}"


def test_get_version():
    expected = VersionInfo(
        driver_version="",
        git_commit="",
        build_date="",
        python_version=platform.python_version(),
        compiler=platform.python_implementation(),
        platform=_runtime_platform(),
    )
    assert get_version() == expected


def test_get_version_json():
    expected = (
        "{\n"
        '  "driverVersion": "",\n'
        '  "gitCommit": "",\n'
        '  "buildDate": "",\n'
        f'  "pythonVersion": "{platform.python_version()}",\n'
        f'  "compiler": "{platform.python_implementation()}",\n'
        f'  "platform": "{_runtime_platform()}"\n'
        "}"
    )
    assert get_version_json() == expected


def test_json_round_trip_matches_dict():
    info = get_version()
    assert json.loads(get_version_json()) == info.to_dict()
    assert list(info.to_dict()) == [
        "driverVersion",
        "gitCommit",
        "buildDate",
        "pythonVersion",
        "compiler",
        "platform",
    ]