"""Core registry logic: identities, caller context, errors and the registry."""
