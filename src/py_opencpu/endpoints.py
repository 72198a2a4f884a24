"""OpenCPU endpoint templates.

Only ``rpc_url`` is used by the invocation engine. The remaining
builders cover the rest of the OpenCPU HTTP API layout for callers
that need to reach packages from other sources or session objects.
"""

from __future__ import annotations

from enum import Enum

RPC_TEMPLATE = "{base}/library/{package}/R/{function}/json?digits=6"


class PackageSource(str, Enum):
    """Where a package is installed on the server."""

    LIBRARY = "library"
    USER = "user"
    CRAN = "cran"
    BIOC = "bioc"
    GITHUB = "github"


def _require(name: str, value: str | None) -> str:
    if not value:
        raise ValueError(f"{name} must be a non-empty string")
    return value


def rpc_url(base_url: str, package: str, function: str) -> str:
    """Build the JSON RPC endpoint for a function in a global package.

    Names are substituted verbatim. The ``digits=6`` query parameter
    fixes the numeric precision of the server's JSON output.

    Example:
        >>> rpc_url("http://localhost:9999/ocpu", "stats", "rnorm")
        'http://localhost:9999/ocpu/library/stats/R/rnorm/json?digits=6'
    """
    return RPC_TEMPLATE.format(
        base=base_url,
        package=_require("package", package),
        function=_require("function", function),
    )


def package_path(
    package: str,
    source: PackageSource = PackageSource.LIBRARY,
    user: str | None = None,
) -> str:
    """Path of a package root for the given source.

    Raises:
        ValueError: If the package name is empty, or the source needs a
            user and none is given.
    """
    package = _require("package", package)
    if source is PackageSource.LIBRARY:
        return f"/library/{package}"
    if source is PackageSource.USER:
        return f"/user/{_require('user', user)}/library/{package}"
    if source is PackageSource.CRAN:
        return f"/cran/{package}"
    if source is PackageSource.BIOC:
        return f"/bioc/{package}"
    return f"/github/{_require('user', user)}/{package}"


def object_path(package_root: str, name: str | None = None) -> str:
    """Path of the R objects of a package, or of one object."""
    if name is None:
        return f"{package_root}/R"
    return f"{package_root}/R/{_require('name', name)}"


def info_path(package_root: str) -> str:
    return f"{package_root}/info"


def data_path(package_root: str) -> str:
    return f"{package_root}/data"


def man_path(package_root: str) -> str:
    return f"{package_root}/man"


def session_path(key: str) -> str:
    """Path of a temporary session created by an earlier call."""
    return f"/tmp/{_require('key', key)}"


def gist_path(user: str) -> str:
    return f"/gist/{_require('user', user)}"
