from odyssey.services.firestore.client import FirestoreClient
from odyssey.services.firestore.decoder import decode_document, decode_fields, decode_value

__all__ = ["FirestoreClient", "decode_document", "decode_fields", "decode_value"]
