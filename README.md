# dxm

A Python library for managing FXServer artifacts and server data.

dxm creates server directories, looks up the versions offered on each
FXServer update channel, downloads and installs artifacts for the current
platform, and keeps track of them in a `dxm.toml` manifest. It can also set
up, update and remove its own installation directory.

## Installation

```
pip install .
```

## Creating a server

```python
from dxm.serverinit import create_server
from dxm.vcs import parse_vcs

create_server("my-server", parse_vcs("git"))
```

`create_server` writes `dxm.toml`, creates `data/server.cfg` and
`data/resources/`, and, for `VcsOption.GIT`, initialises an empty git
repository with `.gitignore` files in the server root and in `data/`.
`parse_vcs` accepts `git` or `none` and raises `ParseVcsOptionError`
otherwise.

## Installing artifacts

```python
from dxm.workflow import find_manifest_or_default, update_artifact

manifest = find_manifest_or_default("my-server")
update_artifact("my-server", manifest)
```

`update_artifact` asks for the newest version of the manifest's channel,
installs it under the artifact path, and records the version in `dxm.toml`.

Lower-level pieces are available as well:

- `dxm.http.client()` and `dxm.http.github_client()` return `requests`
  sessions with the headers dxm sends.
- `dxm.artifacts.cfx.versions(client, platform)` fetches the FXServer
  changelog; `ServerVersions.version(channel)`, `.txadmin(channel)` and
  `.alias_display(channel)` read it.
- `dxm.artifacts.jg.artifacts(client)` fetches the JGScripts Artifacts DB used
  by the `latest-jg` channel.
- `dxm.artifacts.install.install(client, platform, version, path)` downloads
  and extracts a given version.
- `dxm.artifacts.channel.parse_channel` accepts `critical`, `recommended`,
  `optional`, `latest` and `latest-jg`.
- `dxm.artifacts.platforms.default_platform()` returns the platform of the
  running system.

## Manifest

`dxm.manifest.manifest.find_manifest(directory)` looks for `dxm.toml` in the
given directory and its parents and returns `None` if there is none;
`read_manifest` reads one directly and `Manifest.write` saves one:

```toml
[artifact]
path = "artifact"
version = ""
channel = "latest-jg"

[server]
data = "data"
```

A missing `[artifact]` or `[server]` table takes the defaults shown above.

## The dxm installation

`dxm.home.home.default_home()` returns a `Home` at `$DXM_HOME`, or `~/.dxm`
when that variable is unset. `Home.setup`, `Home.update` and
`Home.uninstall` create, update and remove it; `Home.in_env_path`,
`Home.add_to_env_path` and `Home.remove_from_env_path` manage its place on the
user's `PATH` (through `~/.profile` on POSIX systems and the user `PATH`
registry value on Windows). `dxm.home.release.latest_release(client)` fetches
the latest published release.

## Logging

`dxm.logs.init_logging()` sends log records of the `dxm` logger below warning
level to standard output and warnings and errors to standard error, each line
prefixed with a short level name such as `info:` or `error:`.

## What this package does not do

There is no command-line program: no `dxm` command is installed, and there is
no entry point for creating servers, listing or installing artifacts, starting
FXServer, or managing the installation from a shell. Those tasks are done by
calling the functions above from Python.