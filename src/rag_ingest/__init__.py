"""PDF ingestion service feeding the chat assistant's vector store."""
