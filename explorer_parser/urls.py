"""
Explorer URLs: the origin, cluster selection and page addresses.
"""

from enum import Enum
from urllib.parse import urljoin, urlparse

EXPLORER_ORIGIN = "https://explorer.solana.com"


class Cluster(str, Enum):
    MAINNET = "mainnet-beta"
    DEVNET = "devnet"
    TESTNET = "testnet"


class PageKind(str, Enum):
    """Explorer route for each page type."""
    ACCOUNT = "address"
    TRANSACTION = "tx"


def construct_url(cluster: Cluster, kind: PageKind, identifier: str) -> str:
    """
    Page URL for an account address or transaction signature.

    Mainnet is the explorer's default and carries no cluster parameter.
    """
    url = f"{EXPLORER_ORIGIN}/{kind.value}/{identifier}"
    if cluster is Cluster.MAINNET:
        return url
    return f"{url}?cluster={cluster.value}"


def normalize_url(url: str) -> str:
    """Make an explorer href absolute.  Absolute URLs are returned unchanged."""
    parsed = urlparse(url)
    if parsed.scheme and parsed.netloc:
        return url
    return urljoin(EXPLORER_ORIGIN + "/", url)
