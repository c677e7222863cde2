"""Position files and game transcripts."""
