"""Interactive setup of globally allowed shell commands."""
