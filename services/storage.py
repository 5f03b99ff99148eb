"""
Storage for recruiter requests.

Handlers talk to a RequestStore and never to a backend directly:

    store = get_storage()
    record = store.find_by_token(token)

Backends (STORAGE_BACKEND):
    database - Flask-SQLAlchemy tables, schema managed by Flask-Migrate
    file     - in-memory map mirrored to a JSON file after every change
    memory   - the same map without the mirror file

No store method raises; failures are logged and reported as None/False.
"""
import json
import threading
from pathlib import Path
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from models import db, RecruiterRequest, CandidateProfile
from models.recruiter_request import STATUS_COMPLETED
from utils.helpers import mask_token

EXTENSION_KEY = 'kredible_storage'


class RequestStore:
    """Interface shared by all storage backends"""
    backend = None

    def save(self, record):
        raise NotImplementedError

    def find_by_token(self, token):
        raise NotImplementedError

    def get_all(self):
        raise NotImplementedError

    def get_completed(self):
        raise NotImplementedError

    def delete(self, request_id):
        raise NotImplementedError

    def clear(self):
        raise NotImplementedError


class DatabaseRequestStore(RequestStore):
    backend = 'database'

    def save(self, record):
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"[Storage] Error saving request {record.id}: {e}")
            return False
        print(f"[Storage] Saved request {record.id} with token {mask_token(record.token)}")
        return True

    def find_by_token(self, token):
        if not token:
            return None
        try:
            return RecruiterRequest.query.filter_by(token=token).first()
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"[Storage] Error looking up token {mask_token(token)}: {e}")
            return None

    def get_all(self):
        try:
            return RecruiterRequest.query.all()
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"[Storage] Error listing requests: {e}")
            return []

    def get_completed(self):
        try:
            return (RecruiterRequest.query
                    .filter_by(status=STATUS_COMPLETED)
                    .filter(RecruiterRequest.candidate_profile.has())
                    .all())
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"[Storage] Error listing completed requests: {e}")
            return []

    def delete(self, request_id):
        try:
            record = db.session.get(RecruiterRequest, request_id)
            if record is None:
                return False
            db.session.delete(record)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"[Storage] Error deleting request {request_id}: {e}")
            return False
        print(f"[Storage] Deleted request {request_id}")
        return True

    def clear(self):
        try:
            CandidateProfile.query.delete()
            RecruiterRequest.query.delete()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            print(f"[Storage] Error clearing storage: {e}")
            return False
        print("[Storage] Storage cleared")
        return True


class FileRequestStore(RequestStore):
    """Process-wide map keyed by request id, optionally mirrored to a JSON file.

    The mirror lets development servers survive restarts. It is rewritten in
    full after each change and is not a durability mechanism.
    """
    backend = 'file'

    def __init__(self, path=None):
        self.path = Path(path) if path else None
        self._records = {}
        # The development server handles requests on several threads
        self._lock = threading.RLock()
        if self.path is None:
            self.backend = 'memory'
        else:
            self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                stored = json.load(f)
            for item in stored:
                record = RecruiterRequest.from_dict(item)
                self._records[record.id] = record
            print(f"[Storage] Restored {len(self._records)} requests from {self.path}")
        except (OSError, ValueError, KeyError, TypeError) as e:
            print(f"[Storage] Warning: could not load storage file {self.path}: {e}")

    def _snapshot(self):
        with self._lock:
            return list(self._records.values())

    def _persist(self):
        if self.path is None:
            return
        try:
            data = [record.to_dict() for record in self._snapshot()]
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            print(f"[Storage] Persisted {len(data)} requests to {self.path}")
        except (OSError, TypeError, ValueError) as e:
            print(f"[Storage] Warning: could not save storage file {self.path}: {e}")

    def save(self, record):
        with self._lock:
            self._records[record.id] = record
            self._persist()
        print(f"[Storage] Saved request {record.id} with token {mask_token(record.token)}")
        return True

    def find_by_token(self, token):
        if not token:
            return None
        for record in self._snapshot():
            if record.token == token:
                return record
        return None

    def get_all(self):
        return self._snapshot()

    def get_completed(self):
        return [record for record in self._snapshot() if record.is_completed]

    def delete(self, request_id):
        with self._lock:
            if self._records.pop(request_id, None) is None:
                return False
            self._persist()
        print(f"[Storage] Deleted request {request_id}")
        return True

    def clear(self):
        with self._lock:
            self._records.clear()
            self._persist()
        print("[Storage] Storage cleared")
        return True


def create_storage(backend, storage_file=None):
    if backend == 'database':
        return DatabaseRequestStore()
    if backend == 'file':
        return FileRequestStore(storage_file)
    if backend == 'memory':
        return FileRequestStore()
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")


def init_storage(app):
    """Create the store for this application from its config"""
    store = create_storage(app.config['STORAGE_BACKEND'], app.config.get('STORAGE_FILE'))
    app.extensions[EXTENSION_KEY] = store
    print(f"[Storage] Using {store.backend} backend")
    return store


def get_storage():
    return current_app.extensions[EXTENSION_KEY]
