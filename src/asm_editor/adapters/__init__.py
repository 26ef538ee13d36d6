"""Host adapters driving an EditorDocument from UI events."""
