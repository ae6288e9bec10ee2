"""Terminal UI for Pomotodo: Textual app and Rich render helpers."""
