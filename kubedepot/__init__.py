"""
kubedepot serves kubeconfig files over HTTP and merges them on request.

A directory holds one kubeconfig per cluster. The documents are loaded and
checked once at startup, then any subset can be fetched as a single merged
kubeconfig.
"""

__all__ = [
    "kubeconfig",
    "merge",
    "store",
    "resolver",
    "exceptions",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
