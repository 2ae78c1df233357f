# vault-scribe: summaries and flashcards for Markdown vaults via chat completions.

__version__ = "0.3.0"
