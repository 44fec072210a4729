"""FlatWiki - a minimal wiki serving flat text files."""
