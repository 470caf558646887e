"""Domain layer: file-name parsing, URL recognition and value objects."""
