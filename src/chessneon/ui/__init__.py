"""PyQt6 desktop shell: board grid, status line, reset and bot toggle."""
