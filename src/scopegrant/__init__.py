"""scopegrant - scoped role grants for an RBAC layer.

Builds, vets and stores grants that attach authorization rules to roles
within organization and project scopes.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
