from profilehub.application.ports.blob_storage import BlobStorage
from profilehub.application.ports.object_storage import (
    ObjectStorageClient,
    StoredObject,
)

__all__ = ["BlobStorage", "ObjectStorageClient", "StoredObject"]
