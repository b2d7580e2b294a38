"""
Firebase admin initialization and helpers.

This module initializes the Firebase Admin SDK and hands out the async
Firestore client used by the API. The client is created once in the
startup hook, kept on ``app.state`` and closed on shutdown.
"""

import logging
import os

import firebase_admin
from firebase_admin import credentials, firestore_async

logger = logging.getLogger(__name__)


def init_firebase(cred_path: str):
    """
    Initialize Firebase Admin SDK if not already initialized and return
    an async Firestore client.

    ``cred_path`` comes from Settings.FIREBASE_CREDENTIALS.
    """
    # Prevent re-initialization (important for Uvicorn reload)
    if not firebase_admin._apps:
        if not os.path.exists(cred_path):
            raise RuntimeError(
                f"Firebase credentials not found at: {cred_path}\n"
                "Set FIREBASE_CREDENTIALS env var or place firebase_key.json correctly."
            )

        cred = credentials.Certificate(cred_path)
        firebase_admin.initialize_app(cred)
        logger.info("Firebase Admin initialized successfully.")

    return firestore_async.client()
