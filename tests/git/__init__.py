"""Git gateway and workflow tests."""
