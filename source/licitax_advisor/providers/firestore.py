"""This module provides the process-wide Firestore client.

The client is created at most once per process. Initialization tries, in
order, an emulator endpoint, a JSON service-account blob taken from the
configuration and finally Google's application default credentials. When
every attempt fails, the failure is recorded and every later `get_client`
call raises `StoreNotInitializedError`, which the API reports as 503.
"""

import json
import os
import threading

import google.auth
from google.auth.credentials import AnonymousCredentials
from google.auth.exceptions import DefaultCredentialsError, GoogleAuthError
from google.cloud.firestore import Client
from google.oauth2 import service_account
from licitax_advisor.exceptions.resources import StoreNotInitializedError
from licitax_advisor.providers.config import Config, ConfigProvider
from licitax_advisor.providers.logging import Logger, LoggingProvider
from pydantic import BaseModel, ConfigDict

NOT_INITIALIZED_MESSAGE = (
    "Firestore is not initialized. Set FIREBASE_SERVICE_ACCOUNT_JSON or "
    "GOOGLE_APPLICATION_CREDENTIALS and check the startup logs."
)
EMULATOR_PROJECT = "licitax-local"


class StoreInitialization(BaseModel):
    """The outcome of a store initialization attempt.

    Attributes:
        ready: Whether a client is available.
        credential_source: Which credential mechanism produced the client.
        error: Why initialization failed, when it did.
    """

    model_config = ConfigDict(frozen=True)

    ready: bool
    credential_source: str | None = None
    error: str | None = None


class FirestoreProvider:
    """Owns the lazily created, process-wide Firestore client."""

    _client: Client | None = None
    _status: StoreInitialization | None = None
    _lock = threading.Lock()

    @classmethod
    def initialize(cls) -> StoreInitialization:
        """Initializes the Firestore client once and records the outcome.

        Repeated calls return the recorded outcome without touching the
        credentials again, whether the first attempt succeeded or not.

        Returns:
            The outcome of the (first) initialization attempt.
        """
        if cls._status is None:
            with cls._lock:
                if cls._status is None:
                    cls._status = cls._create_client()
        return cls._status

    @classmethod
    def get_client(cls) -> Client:
        """Returns the Firestore client, initializing it on first use.

        Returns:
            The shared Firestore client.

        Raises:
            StoreNotInitializedError: If no credentials could be resolved.
        """
        status = cls.initialize()
        if not status.ready or cls._client is None:
            raise StoreNotInitializedError(NOT_INITIALIZED_MESSAGE, status.error)
        return cls._client

    @classmethod
    def is_ready(cls) -> bool:
        """Reports whether a client is available, initializing if needed.

        Returns:
            True when `get_client` would succeed.
        """
        return cls.initialize().ready

    @classmethod
    def reset(cls) -> None:
        """Forgets the client and the recorded outcome."""
        with cls._lock:
            if cls._client is not None:
                cls._client.close()
            cls._client = None
            cls._status = None

    @classmethod
    def _create_client(cls) -> StoreInitialization:
        """Runs the initialization attempts in order.

        Returns:
            The outcome of the attempts.
        """
        logger: Logger = LoggingProvider().get_logger()
        config: Config = ConfigProvider.get_config()

        if config.GCP_FIRESTORE_HOST:
            logger.info(f"Initializing Firestore against the emulator at {config.GCP_FIRESTORE_HOST}...")
            os.environ["FIRESTORE_EMULATOR_HOST"] = config.GCP_FIRESTORE_HOST
            cls._client = Client(
                project=config.GCP_PROJECT or EMULATOR_PROJECT,
                credentials=AnonymousCredentials(),
                database=config.GCP_FIRESTORE_DATABASE,
            )
            return StoreInitialization(ready=True, credential_source="emulator")

        if config.FIREBASE_SERVICE_ACCOUNT_JSON:
            try:
                info = json.loads(config.FIREBASE_SERVICE_ACCOUNT_JSON)
                credentials = service_account.Credentials.from_service_account_info(info)
                logger.info("Initializing Firestore with FIREBASE_SERVICE_ACCOUNT_JSON...")
                cls._client = Client(
                    project=info.get("project_id") or config.GCP_PROJECT,
                    credentials=credentials,
                    database=config.GCP_FIRESTORE_DATABASE,
                )
                return StoreInitialization(ready=True, credential_source="service_account_json")
            except (ValueError, GoogleAuthError) as e:
                logger.error(f"Failed to use FIREBASE_SERVICE_ACCOUNT_JSON: {e}")

        try:
            logger.info("Attempting to initialize Firestore with application default credentials...")
            credentials, project = google.auth.default()
            cls._client = Client(
                project=config.GCP_PROJECT or project,
                credentials=credentials,
                database=config.GCP_FIRESTORE_DATABASE,
            )
            return StoreInitialization(ready=True, credential_source="application_default")
        except DefaultCredentialsError as e:
            logger.warning(f"Application default credentials are not available: {e}")
            logger.error(NOT_INITIALIZED_MESSAGE)
            return StoreInitialization(ready=False, error=str(e))
