"""Fixed values that are deliberately not exposed as settings."""

# Local embedding model. The FAISS folder must only ever be written and
# read with this model, otherwise the stored vectors are meaningless.
LOCAL_EMBEDDINGS_MODEL = "sentence-transformers/all-MiniLM-L6-v2"

FAISS_STORE_FOLDER = ".faiss"

CHUNK_SIZE = 1500
CHUNK_OVERLAP = 100

PDF_CONTENT_TYPE = "application/pdf"

AZURE_COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"
