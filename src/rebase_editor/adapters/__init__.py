"""Host adapters for the rebase editor."""
