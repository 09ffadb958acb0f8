# powervs_csi

Building blocks for a block storage CSI driver. The package uses only the
standard library.

- **Volume sizing** (`powervs_csi.util`): round byte counts up to whole GiB and
  convert between bytes and GiB.
- **Endpoint parsing** (`powervs_csi.util`): turn `unix://` and `tcp://`
  endpoints into a scheme and an address. For a unix endpoint, any file that is
  already at the socket path is removed so that the address can be bound
  again.
- **Access modes** (`powervs_csi.util`): list the access mode names of a set of
  volume capabilities.
- **Per-volume locks** (`powervs_csi.volume_lock`): a thread-safe set of volume
  IDs that have an operation in progress.
- **Version info** (`powervs_csi.version`): build metadata and runtime details
  as a dataclass or as JSON.

## Installation

```
pip install .
```

## Usage

### Sizes

```python
from powervs_csi.util import GIB, round_up_bytes, round_up_gib, bytes_to_gib, gib_to_bytes

round_up_gib(1)               # 1
round_up_bytes(1024)          # 1073741824 (GIB)
round_up_bytes(1073741825)    # 2147483648 (1 GiB + 1 byte rounds up to 2 GiB)
bytes_to_gib(5 * GIB)         # 5
gib_to_bytes(3)               # 3221225472
```

`bytes_to_gib` drops any remainder; the `round_up_*` functions round up.

### Endpoints

```python
from powervs_csi.util import parse_endpoint, EndpointError

parse_endpoint("unix:///csi/csi.sock")   # ("unix", "/csi/csi.sock")
parse_endpoint("unix://csi/csi.sock")    # ("unix", "/csi/csi.sock")
parse_endpoint("tcp:///127.0.0.1/")      # ("tcp", "/127.0.0.1")

try:
    parse_endpoint("http://127.0.0.1")
except EndpointError as err:
    print(err)                           # unsupported protocol: http
```

`EndpointError` is a `ValueError`. It is also raised if a file at a unix socket
path exists but cannot be removed. A missing file is not an error.

### Access modes

```python
from powervs_csi.util import AccessMode, VolumeCapability, get_access_modes

caps = [
    VolumeCapability(AccessMode.SINGLE_NODE_WRITER),
    VolumeCapability(AccessMode.SINGLE_NODE_READER_ONLY),
]
get_access_modes(caps)   # ["SINGLE_NODE_WRITER", "SINGLE_NODE_READER_ONLY"]
```

A `VolumeCapability` with no access mode reports `AccessMode.UNKNOWN` through
its `mode` property.

### Volume locks

```python
from powervs_csi.volume_lock import VolumeLocks, VolumeOperationAlreadyExists

locks = VolumeLocks()

if locks.try_acquire("vol-1"):
    try:
        ...  # work on vol-1
    finally:
        locks.release("vol-1")

# The same thing as a context manager. It raises if the volume is busy.
try:
    with locks.hold("vol-1"):
        ...
except VolumeOperationAlreadyExists as err:
    print(err)   # An operation with the given volume key vol-1 already exists
```

Releasing a volume that is not held does nothing.

### Version

```python
from powervs_csi.version import get_version, get_version_json

info = get_version()
info.to_dict()
print(get_version_json())
```

The JSON object has the keys `driverVersion`, `gitCommit`, `buildDate`,
`pythonVersion`, `compiler` and `platform`, indented by two spaces. The first
three come from the module constants `DRIVER_VERSION`, `GIT_COMMIT` and
`BUILD_DATE`, which are empty strings unless set at release time.

## What this package does not do

It provides helpers only. There is no driver server, no command to run, no
controller or node service, and no calls to a cloud storage API for creating,
attaching, resizing or deleting volumes.

## Running the tests

```
pip install .[test]
pytest
```