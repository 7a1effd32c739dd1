"""Built-in plugins shipped with lendctl."""
