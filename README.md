# fungi

Small helpers for paths, the filesystem, the current user, byte sizes and
time formatting on POSIX systems. Paths go in as `str` or any `os.PathLike`
and come back as `str`.

## Modules

### `fungi.pathlex`

Lexical path operations. None of them touch the disk.

- `components(path)` splits a path. The root is `"/"`. Repeated and trailing
  slashes are ignored, and `"."` is kept only when it starts a relative path.
- `clean(path)` gives the shortest equivalent path. It removes `.` and inner
  `..`, drops `..` straight after the root and keeps leading `..` of a
  relative path. An empty result becomes `"."`.
- `mash(dir, base)` joins two paths. It drops a leading `/` of `base` and any
  trailing `/`.
- `concat`, `dirname`, `base`, `ext`, `name` and `trim_ext` deal with parts
  of the name.
- `first`, `last`, `trim_first` and `trim_last` deal with components.
- `trim_prefix` and `trim_suffix` remove text from either end.
  `trim_protocol` removes a leading `file://`, `ftp://`, `http://` or
  `https://`, in any case.
- `has`, `has_prefix`, `has_suffix` and `is_empty` test a path.
- `parse_paths(value)` splits a colon separated list such as `$PATH`. An
  empty entry becomes the current directory.
- `PathError` (a `ValueError`) is raised for empty paths and for missing
  parts.

### `fungi.expand`

- `expand(path)` expands a leading `~` and whole-component `$VAR` or
  `${VAR}`. More than one `~`, a `~` that is not at the start, an unknown
  variable or an unclosed `${` raises `PathError`.
- `abs_path(path)` expands the path, removes a protocol prefix, cleans it and
  resolves it against the working directory.
- `abs_from(path, base)` resolves a relative path against the directory that
  holds `base`.
- `relative_from(path, base)` expresses `path` relative to `base`.
- `rel_to(dir)` trims the working directory back to the component named
  `dir`.

### `fungi.fsquery`

- `exists`, `is_dir`, `is_file`, `is_exec`, `is_readonly`, `is_symlink`,
  `is_symlink_dir` and `is_symlink_file` return `False` rather than raise.
  `is_readonly` means no write bit is set.
- `metadata`, `readlink`, `uid`, `gid` and `chmod` expand the path first.
- `mode(path)` returns the full `st_mode`, file-type bits included, for the
  path as given.

### `fungi.listing`

Every listing comes back as absolute paths. The target must be an existing
directory. If it is missing, `FileNotFoundError` is raised. If it is not a
directory, `NotADirectoryError` is raised.

- `dirs`, `files` and `paths` list direct children, sorted.
- `all_dirs`, `all_files` and `all_paths` walk the whole tree depth first
  without following symlinks. Each directory comes before its contents, and
  siblings are sorted by name.
- `glob(src)` matches `*`, `?` and `[...]` within a component, and `**`
  across directories. Wildcards also match names that start with a dot.

### `fungi.user`

- `home_dir`, `config_dir`, `cache_dir`, `data_dir`, `runtime_dir`,
  `data_dirs`, `config_dirs` and `path_dirs` read `$HOME`, the `XDG_*`
  variables and `$PATH`. When a variable is unset they fall back to the usual
  XDG defaults.
- `temp_dir(prefix)` creates a new `/tmp/<prefix>-<8 random characters>`
  directory. Removing it is up to the caller.
- `User` is a dataclass with `is_root()`. `lookup(uid)`, `current()` and
  `name()` read it from the passwd database. `UserError` is raised for
  unknown ids and for a missing `$HOME` or `$PATH`.
- `getuid`, `getgid`, `geteuid` and `getegid` return the process ids.
  `setuid`, `seteuid`, `setgid` and `setegid` change them.
- `getrids(uid, gid)` gives the real ids behind sudo, taken from
  `SUDO_UID`/`SUDO_GID`, when `uid` is 0.
- `pause_sudo`, `drop_sudo`, `sudo` and `switchuser` change the real,
  effective and saved ids. Refusals from the system raise `OSError`.

### `fungi.bytesize`

- `KIBIBYTE`, `MEBIBYTE`, `GIBIBYTE` and `TEBIBYTE` are the unit sizes.
- `to_human(val)` formats a byte count with two decimals and drops `.00`.
- `to_kib`, `to_mib`, `to_gib` and `to_tib` convert a byte count.

### `fungi.timefmt`

- `Local.now()`, `Local.timestamp(secs)`, `Utc.now()` and
  `Utc.timestamp(secs)` build a broken-down time.
- `.format(fmt)` applies strftime directives. A result of 100 bytes or more
  comes back empty. `Utc` writes the zone name as `UTC`.
- `set_timezone(tz)` sets `TZ` and reloads the process time zone.

## Example

```python
from fungi import bytesize, expand, pathlex, timefmt

pathlex.clean("/foo//bar/../baz/")           # "/foo/baz"
pathlex.mash("/foo", "/bar")                  # "/foo/bar"
pathlex.trim_protocol("https://example.com")  # "example.com"
expand.abs_path("~/projects/../notes")        # "<home>/notes"
bytesize.to_human(5024)                       # "4.91 KiB"
timefmt.Utc.timestamp(1_607_789_295).format("%a %e %b %Y %r %Z")
# "Sat 12 Dec 2020 04:08:15 PM UTC"
```

## What it does not do

This is a library only, with no command-line program. It relies on the POSIX
`pwd` module and POSIX id calls, so it does not run on Windows.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```