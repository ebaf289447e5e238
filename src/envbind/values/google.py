"""Google Cloud resource identifiers parsed from their full resource names."""

import re
from dataclasses import dataclass


class InvalidGoogleTopicIDError(ValueError):
    def __init__(self):
        super().__init__("topic is not valid format")


class InvalidGoogleFirestoreIDError(ValueError):
    def __init__(self):
        super().__init__("firestore id is not valid format")


_TOPIC_RE = re.compile(r"projects/([\w-]+)/topics/([\w-]+)")
# "(default)" is the id of a project's default database.
_FIRESTORE_RE = re.compile(r"projects/([\w-]+)/databases/([\w()-]+)")


@dataclass
class GooglePubSubTopic:
    """A Pub/Sub topic given as ``projects/<project>/topics/<topic>``."""

    project_id: str = ""
    topic_id: str = ""

    def set(self, value: str) -> None:
        match = _TOPIC_RE.search(value)
        if not match:
            raise InvalidGoogleTopicIDError()
        self.project_id, self.topic_id = match.groups()

    def __str__(self) -> str:
        return f"projects/{self.project_id}/topics/{self.topic_id}"


@dataclass
class GoogleFirestoreDatabase:
    """A Firestore database given as ``projects/<project>/databases/<database>``."""

    project_id: str = ""
    database: str = ""

    def set(self, value: str) -> None:
        match = _FIRESTORE_RE.search(value)
        if not match:
            raise InvalidGoogleFirestoreIDError()
        self.project_id, self.database = match.groups()

    def __str__(self) -> str:
        return f"projects/{self.project_id}/databases/{self.database}"
