"""Remote URL parsing utilities."""

import re

from git_healthcheck.models.remote import Remote, Transport


# Prefixes stripped from a URL, in order, before the host is cut out
_HOST_PREFIXES = (
    re.compile(r"^ssh://git@"),
    re.compile(r"^git@"),
    re.compile(r"^https?://"),
    re.compile(r"^ssh://"),
)

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
# Remaining user@ or user:token@ of a scheme URL, bounded by the path
_URL_USERINFO = re.compile(r"^[^@/]*@")
# Remaining user@ of an scp-style URL, bounded by the host:path colon
_SCP_USER = re.compile(r"^[^@:/]*@")

_HOST_END = re.compile(r"[:/]")

_SSH_URL = re.compile(r"^(git@|ssh://)")
_HTTPS_URL = re.compile(r"^https?://")


def extract_host(url: str) -> str:
    """
    Extract the host name from a remote URL.

    Args:
        url: Remote URL such as git@host:path, ssh://git@host/path or https://host/path

    Returns:
        Host name, or the whole stripped URL when there is no separator
    """
    host = url.strip()
    userinfo = _URL_USERINFO if _SCHEME.match(host) else _SCP_USER
    for prefix in _HOST_PREFIXES:
        host = prefix.sub("", host, count=1)
    host = userinfo.sub("", host, count=1)
    return _HOST_END.split(host, maxsplit=1)[0]


def classify_transport(url: str) -> Transport:
    """
    Classify how git will reach a remote URL.

    Args:
        url: Remote URL

    Returns:
        SSH for git@/ssh:// URLs, HTTPS for http(s):// URLs, UNKNOWN otherwise
    """
    url = url.strip()
    if _SSH_URL.match(url):
        return Transport.SSH
    if _HTTPS_URL.match(url):
        return Transport.HTTPS
    return Transport.UNKNOWN


def parse_remote(name: str, url: str) -> Remote:
    """Build a Remote from a name and the URL git reports for it."""
    url = url.strip()
    return Remote(name=name, url=url, host=extract_host(url), transport=classify_transport(url))
