"""
Document container.

File-backed collection of JSON documents, partitioned by one field.
"""

import json
import os
import shutil
import logging
from typing import Dict, List, Optional, Tuple

from whiskeyclub.models.errors import InvalidArgumentError, MissingRequiredValueError

logger = logging.getLogger(__name__)


class DocumentContainer:
    """
    A named set of documents keyed by (partition key value, id).

    Persisted as data_root/<name>.json, with a .backup copy of the
    previous save.
    """

    def __init__(self, data_root: str, name: str, partition_key: str):
        """
        Initialize container from disk or create an empty one.

        Args:
            data_root: Root data directory
            name: Container name (e.g., "Reviews")
            partition_key: Document field used as the partition key (e.g., "reviewId")
        """
        self.name = name
        self.partition_key = partition_key
        self.path = os.path.join(data_root, f"{name}.json")
        self.documents: Dict[Tuple[str, str], Dict] = {}  # (partition, id) -> document

        os.makedirs(data_root, exist_ok=True)

        if os.path.exists(self.path):
            self._load()
        else:
            logger.info(f"No existing container file at {self.path}, starting empty")

    def _load(self) -> None:
        """Load documents from disk."""
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)

            # Bare list of documents, or dict with metadata and documents
            documents = data if isinstance(data, list) else data.get("documents", [])

            self.documents = {}
            for document in documents:
                self.documents[self._key(document)] = document

            logger.info(f"Loaded {len(self.documents)} documents into {self.name}")

        except Exception as e:
            logger.error(f"Failed to load container {self.name}: {e}")
            self._try_restore_from_backup()

    def _try_restore_from_backup(self) -> None:
        """Attempt to restore from backup file if the container file is corrupted."""
        backup_path = f"{self.path}.backup"
        if os.path.exists(backup_path):
            logger.warning(f"Attempting to restore {self.name} from backup: {backup_path}")
            try:
                with open(backup_path, 'r') as f:
                    data = json.load(f)
                documents = data if isinstance(data, list) else data.get("documents", [])
                self.documents = {self._key(document): document for document in documents}
                shutil.copy(backup_path, self.path)
                logger.info(f"Restored {len(self.documents)} documents into {self.name}")
            except Exception as e:
                logger.error(f"Backup restoration failed: {e}. Starting {self.name} empty.")
                self.documents = {}
        else:
            logger.warning(f"No backup file found. Starting {self.name} empty.")
            self.documents = {}

    def _key(self, document: Dict) -> Tuple[str, str]:
        item_id = document.get("id")
        if not isinstance(item_id, str) or not item_id.strip():
            raise InvalidArgumentError("id", f"Document in {self.name} has no id")

        partition = document.get(self.partition_key)
        if partition is None:
            raise MissingRequiredValueError(self.partition_key)

        return partition, item_id

    def validate(self, document: Dict) -> Tuple[str, str]:
        """
        Check a document can be stored here without storing it.

        Returns:
            (partition key value, id)

        Raises:
            InvalidArgumentError: If the document has no id
            MissingRequiredValueError: If the partition key value is missing
        """
        return self._key(document)

    def upsert(self, document: Dict) -> None:
        """
        Insert or replace a document.

        Raises:
            InvalidArgumentError: If the document has no id
            MissingRequiredValueError: If the partition key value is missing
        """
        key = self.validate(document)
        self.documents[key] = dict(document)
        logger.debug(f"Upserted {key[1]} into {self.name} (partition {key[0]!r})")

    def read(self, item_id: str, partition_key: str) -> Optional[Dict]:
        """Point read. Returns None if not found."""
        return self.documents.get((partition_key, item_id))

    def query(self, partition_key: str) -> List[Dict]:
        """Return all documents in one partition, ordered by id."""
        matches = [
            document for (partition, _), document in self.documents.items()
            if partition == partition_key
        ]
        return sorted(matches, key=lambda document: document["id"])

    def all(self) -> List[Dict]:
        """Return every document, ordered by partition then id."""
        return [self.documents[key] for key in sorted(self.documents)]

    def save(self) -> None:
        """
        Persist container to disk with atomic write pattern.
        Creates backup before write.
        """
        if os.path.exists(self.path):
            backup_path = f"{self.path}.backup"
            shutil.copy(self.path, backup_path)
            logger.debug(f"Created backup: {backup_path}")

        data = {
            "name": self.name,
            "partition_key": self.partition_key,
            "documents": self.all()
        }

        temp_path = f"{self.path}.tmp"
        try:
            with open(temp_path, 'w') as f:
                json.dump(data, f, indent=2)

            os.replace(temp_path, self.path)
            logger.info(f"Container {self.name} saved: {len(self.documents)} documents")

        except OSError as e:
            logger.error(f"Failed to save container {self.name}: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise
