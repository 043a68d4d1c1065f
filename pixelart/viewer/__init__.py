"""Interactive viewer (requires tkinter)."""
