# fhashkit

fhashkit computes MD5, SHA-1, SHA-256 and SHA-512 digests of files in pure
Python, with no third-party dependencies. Each file is read once and all four
digests are computed in the same pass. Alongside the digests it records the
file's size, its last-modified time (local time, `YYYY-MM-DD HH:MM`) and, for
Windows PE executables, the file version stored in the resource section.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
fhashkit path/to/file another/file
```

For every file the command prints its name, size, modified date, version (when
there is one) and the four digests, in lower case by default. Files that cannot
be opened (missing files, directories) are printed with an error message
instead, and the command then exits with status 1.

Options:

- `-u`, `--uppercase` — print digests in upper case.
- `-f HASH`, `--find HASH` — after hashing, list the files whose digests
  contain `HASH` (case-insensitive, surrounding whitespace ignored).
- `--arch` — print `x64` or `arm64` for the running machine (`unknown`
  otherwise) and exit.

The same command is available as `python -m fhashkit.cli`.

## Hash objects

Each algorithm is an incremental hash object whose hex output is upper case:

```python
from fhashkit.sha256 import SHA256

h = SHA256()
h.update(b"abc")
print(h.hexdigest())
```

- `fhashkit.md5.MD5(seed=0)` — MD5 with `update`, `digest` and `hexdigest`.
  A non-zero seed perturbs the initial constants; a seed of 0 gives standard MD5.
- `fhashkit.sha1.SHA1` — SHA-1 with `reset()`, `update(data)`,
  `hash_file(path)`, `final()`, `digest()` and `report_hash(report_type)`,
  where `ReportType.HEX` gives upper-case hex and `ReportType.DIGIT` gives the
  digest bytes as concatenated decimal numbers. `digest()` and `report_hash()`
  return the value computed by the last `final()`.
- `fhashkit.sha256.SHA256` — SHA-256 with `update`, `final`, `digest` and
  `hexdigest`; once finalised it refuses further updates.
- `fhashkit.sha512.SHA512` — SHA-512 with `update`, `digest` and `hexdigest`;
  `digest()` does not end the hash, so more data may be fed afterwards. The
  one-shot `fhashkit.sha512.sha512(data)` returns the raw digest.

## Hashing many files

`fhashkit.engine.run_hash_job(job)` walks the paths of a
`fhashkit.results.HashJob`, appends a `ResultData` for each file to
`job.results` and reports progress to the job's `fhashkit.results.UIBridge`.
It returns True when every file was processed and False if it stopped because
`job.stop` was set. When the job has fewer than 200 files their sizes are
gathered first, so whole-job progress is reported as data is read; otherwise it
is reported once per finished file.

Subclass `UIBridge` to receive `show_file_name`, `show_file_meta`,
`show_file_hash`, `show_file_err`, `update_prog`, `update_prog_whole` and the
other hooks. `prog_max()` sets the value that stands for a full progress bar
(100 by default). Each `ResultData` carries a `ResultState` of `PATH`, `META`,
`ALL` or `ERROR`.

For an event-driven front end, `fhashkit.hashmgmt.HashMgmt` runs the job on a
worker thread and fires the `Event`s of a `UIBridgeDelegate`; handlers receive
copies of the results:

```python
from fhashkit.hashmgmt import HashMgmt, UIBridgeDelegate

delegate = UIBridgeDelegate(100)
delegate.show_file_hash.subscribe(lambda result, upper: print(result.path, result.sha256))

mgmt = HashMgmt(delegate)
mgmt.add_files(["setup.cfg", "data.bin"])
mgmt.start_hash_thread()
mgmt.wait(None)

for result in mgmt.find_result("e3b0c442"):
    print(result.path)
```

`HashMgmt` also has `clear()`, `set_stop(value)`, `set_uppercase(value)` and
`total_size()`. `find_result` matches a case-insensitive, whitespace-trimmed
fragment of any of the four digests; blank text matches nothing.

## Helpers

- `fhashkit.osfile.OsFile` — opens regular files by path (raising
  `OsFileError` for missing files and directories) with `read`, `write`,
  `seek`, `length`, `modified_time` and `modified_time_format`; usable as a
  context manager.
- `fhashkit.fileversion.file_version(path)` reads the
  `major.minor.build.revision` version of a PE executable, or returns an empty
  string; `FileVersionHelper(stream).find()` does the same for an open stream.
- `fhashkit.utils.short_size(size, convert_small, kilo)` formats a byte count
  as `KB`, `MB` or `GB` with two decimals; `current_millis()` returns the wall
  clock in milliseconds.
- `fhashkit.strhelper` holds trimming, replacing, newline fixing, ASCII case
  conversion, base conversion and case-insensitive search helpers.
- `fhashkit.strings` provides per-language string tables with fallback to a
  base language and then to the key itself.

## What it does not do

fhashkit has no graphical interface: results are printed by the command or
delivered to your own `UIBridge` or event handlers. It does not save results to
a file or verify files against a stored list of digests.