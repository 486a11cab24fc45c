from .local_image_storage import LocalImageStorage
from .upload_image_picker import UploadImagePicker

__all__ = ["LocalImageStorage", "UploadImagePicker"]
