"""
Records for MediaService.

Namespace: https://adwords.google.com/api/adwords/cm/v201802

Media is polymorphic: Image, Video, Audio and MediaBundle entries are told
apart by ``xsi:type`` or the ``Media.Type`` element.
"""

from enum import StrEnum

from pydantic_xml import element

from adwords.soap.binding import Base64Bytes, OpenEnum
from adwords.v201802.models.common import ApiError, CmModel, Selector


class MediaMediaType(StrEnum):
    AUDIO = "AUDIO"
    DYNAMIC_IMAGE = "DYNAMIC_IMAGE"
    ICON = "ICON"
    IMAGE = "IMAGE"
    STANDARD_ICON = "STANDARD_ICON"
    VIDEO = "VIDEO"
    MEDIA_BUNDLE = "MEDIA_BUNDLE"


class MediaMimeType(StrEnum):
    IMAGE_JPEG = "IMAGE_JPEG"
    IMAGE_GIF = "IMAGE_GIF"
    IMAGE_PNG = "IMAGE_PNG"
    FLASH = "FLASH"
    TEXT_HTML = "TEXT_HTML"
    PDF = "PDF"
    MSWORD = "MSWORD"
    MSEXCEL = "MSEXCEL"
    RTF = "RTF"
    AUDIO_WAV = "AUDIO_WAV"
    AUDIO_MP3 = "AUDIO_MP3"
    HTML5_AD_ZIP = "HTML5_AD_ZIP"


class MediaSize(StrEnum):
    FULL = "FULL"
    SHRUNKEN = "SHRUNKEN"
    PREVIEW = "PREVIEW"
    VIDEO_THUMBNAIL = "VIDEO_THUMBNAIL"


class AudioErrorReason(StrEnum):
    INVALID_AUDIO = "INVALID_AUDIO"
    PROBLEM_READING_AUDIO_FILE = "PROBLEM_READING_AUDIO_FILE"
    ERROR_STORING_AUDIO = "ERROR_STORING_AUDIO"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    UNSUPPORTED_AUDIO = "UNSUPPORTED_AUDIO"
    ERROR_GENERATING_STREAMING_URL = "ERROR_GENERATING_STREAMING_URL"


class ImageErrorReason(StrEnum):
    INVALID_IMAGE = "INVALID_IMAGE"
    STORAGE_ERROR = "STORAGE_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    UNEXPECTED_SIZE = "UNEXPECTED_SIZE"
    ANIMATED_NOT_ALLOWED = "ANIMATED_NOT_ALLOWED"
    ANIMATION_TOO_LONG = "ANIMATION_TOO_LONG"
    SERVER_ERROR = "SERVER_ERROR"
    CMYK_JPEG_NOT_ALLOWED = "CMYK_JPEG_NOT_ALLOWED"
    FLASH_NOT_ALLOWED = "FLASH_NOT_ALLOWED"
    FLASH_WITHOUT_CLICKTAG = "FLASH_WITHOUT_CLICKTAG"
    FLASH_ERROR_AFTER_FIXING_CLICK_TAG = "FLASH_ERROR_AFTER_FIXING_CLICK_TAG"
    ANIMATED_VISUAL_EFFECT = "ANIMATED_VISUAL_EFFECT"
    FLASH_ERROR = "FLASH_ERROR"
    LAYOUT_PROBLEM = "LAYOUT_PROBLEM"
    PROBLEM_READING_IMAGE_FILE = "PROBLEM_READING_IMAGE_FILE"
    ERROR_STORING_IMAGE = "ERROR_STORING_IMAGE"
    ASPECT_RATIO_NOT_ALLOWED = "ASPECT_RATIO_NOT_ALLOWED"
    FLASH_HAS_NETWORK_OBJECTS = "FLASH_HAS_NETWORK_OBJECTS"
    FLASH_HAS_NETWORK_METHODS = "FLASH_HAS_NETWORK_METHODS"
    FLASH_HAS_URL = "FLASH_HAS_URL"
    FLASH_HAS_MOUSE_TRACKING = "FLASH_HAS_MOUSE_TRACKING"
    FLASH_HAS_RANDOM_NUM = "FLASH_HAS_RANDOM_NUM"
    FLASH_SELF_TARGETS = "FLASH_SELF_TARGETS"
    FLASH_BAD_GETURL_TARGET = "FLASH_BAD_GETURL_TARGET"
    FLASH_VERSION_NOT_SUPPORTED = "FLASH_VERSION_NOT_SUPPORTED"
    FLASH_WITHOUT_HARD_CODED_CLICK_URL = "FLASH_WITHOUT_HARD_CODED_CLICK_URL"
    INVALID_FLASH_FILE = "INVALID_FLASH_FILE"
    FAILED_TO_FIX_CLICK_TAG_IN_FLASH = "FAILED_TO_FIX_CLICK_TAG_IN_FLASH"
    FLASH_ACCESSES_NETWORK_RESOURCES = "FLASH_ACCESSES_NETWORK_RESOURCES"
    FLASH_EXTERNAL_JS_CALL = "FLASH_EXTERNAL_JS_CALL"
    FLASH_EXTERNAL_FS_CALL = "FLASH_EXTERNAL_FS_CALL"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    IMAGE_DATA_TOO_LARGE = "IMAGE_DATA_TOO_LARGE"
    IMAGE_PROCESSING_ERROR = "IMAGE_PROCESSING_ERROR"
    IMAGE_TOO_SMALL = "IMAGE_TOO_SMALL"
    INVALID_INPUT = "INVALID_INPUT"
    PROBLEM_READING_FILE = "PROBLEM_READING_FILE"


class MediaBundleErrorReason(StrEnum):
    ENTRY_POINT_CANNOT_BE_SET_USING_MEDIA_SERVICE = "ENTRY_POINT_CANNOT_BE_SET_USING_MEDIA_SERVICE"
    BAD_REQUEST = "BAD_REQUEST"
    DOUBLECLICK_BUNDLE_NOT_ALLOWED = "DOUBLECLICK_BUNDLE_NOT_ALLOWED"
    EXTERNAL_URL_NOT_ALLOWED = "EXTERNAL_URL_NOT_ALLOWED"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    GOOGLE_WEB_DESIGNER_ZIP_FILE_NOT_PUBLISHED = "GOOGLE_WEB_DESIGNER_ZIP_FILE_NOT_PUBLISHED"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_MEDIA_BUNDLE = "INVALID_MEDIA_BUNDLE"
    INVALID_MEDIA_BUNDLE_ENTRY = "INVALID_MEDIA_BUNDLE_ENTRY"
    INVALID_MIME_TYPE = "INVALID_MIME_TYPE"
    INVALID_PATH = "INVALID_PATH"
    INVALID_URL_REFERENCE = "INVALID_URL_REFERENCE"
    MEDIA_DATA_TOO_LARGE = "MEDIA_DATA_TOO_LARGE"
    MISSING_PRIMARY_MEDIA_BUNDLE_ENTRY = "MISSING_PRIMARY_MEDIA_BUNDLE_ENTRY"
    SERVER_ERROR = "SERVER_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"
    SWIFFY_BUNDLE_NOT_ALLOWED = "SWIFFY_BUNDLE_NOT_ALLOWED"
    TOO_MANY_FILES = "TOO_MANY_FILES"
    UNEXPECTED_SIZE = "UNEXPECTED_SIZE"
    UNSUPPORTED_GOOGLE_WEB_DESIGNER_ENVIRONMENT = "UNSUPPORTED_GOOGLE_WEB_DESIGNER_ENVIRONMENT"
    UNSUPPORTED_HTML5_FEATURE = "UNSUPPORTED_HTML5_FEATURE"
    URL_IN_MEDIA_BUNDLE_NOT_SSL_COMPLIANT = "URL_IN_MEDIA_BUNDLE_NOT_SSL_COMPLIANT"


class MediaErrorReason(StrEnum):
    CANNOT_ADD_STANDARD_ICON = "CANNOT_ADD_STANDARD_ICON"
    CANNOT_SELECT_STANDARD_ICON_WITH_OTHER_TYPES = "CANNOT_SELECT_STANDARD_ICON_WITH_OTHER_TYPES"
    CANNOT_SPECIFY_MEDIA_ID_AND_DATA = "CANNOT_SPECIFY_MEDIA_ID_AND_DATA"
    DUPLICATE_MEDIA = "DUPLICATE_MEDIA"
    EMPTY_FIELD = "EMPTY_FIELD"
    ENTITY_REFERENCED_IN_MULTIPLE_OPS = "ENTITY_REFERENCED_IN_MULTIPLE_OPS"
    FIELD_NOT_SUPPORTED_FOR_MEDIA_SUB_TYPE = "FIELD_NOT_SUPPORTED_FOR_MEDIA_SUB_TYPE"
    INVALID_MEDIA_ID = "INVALID_MEDIA_ID"
    INVALID_MEDIA_SUB_TYPE = "INVALID_MEDIA_SUB_TYPE"
    INVALID_MEDIA_TYPE = "INVALID_MEDIA_TYPE"
    INVALID_MIME_TYPE = "INVALID_MIME_TYPE"
    INVALID_REFERENCE_ID = "INVALID_REFERENCE_ID"
    INVALID_YOU_TUBE_ID = "INVALID_YOU_TUBE_ID"
    MEDIA_FAILED_TRANSCODING = "MEDIA_FAILED_TRANSCODING"
    MEDIA_NOT_TRANSCODED = "MEDIA_NOT_TRANSCODED"
    MEDIA_TYPE_DOES_NOT_MATCH_OBJECT_TYPE = "MEDIA_TYPE_DOES_NOT_MATCH_OBJECT_TYPE"
    NO_FIELDS_SPECIFIED = "NO_FIELDS_SPECIFIED"
    NULL_REFERENCE_ID_AND_MEDIA_ID = "NULL_REFERENCE_ID_AND_MEDIA_ID"
    TOO_LONG = "TOO_LONG"
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    YOU_TUBE_SERVICE_UNAVAILABLE = "YOU_TUBE_SERVICE_UNAVAILABLE"
    YOU_TUBE_VIDEO_HAS_NON_POSITIVE_DURATION = "YOU_TUBE_VIDEO_HAS_NON_POSITIVE_DURATION"
    YOU_TUBE_VIDEO_NOT_FOUND = "YOU_TUBE_VIDEO_NOT_FOUND"


class VideoErrorReason(StrEnum):
    INVALID_VIDEO = "INVALID_VIDEO"
    STORAGE_ERROR = "STORAGE_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    ERROR_GENERATING_STREAMING_URL = "ERROR_GENERATING_STREAMING_URL"
    UNEXPECTED_SIZE = "UNEXPECTED_SIZE"
    SERVER_ERROR = "SERVER_ERROR"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    VIDEO_PROCESSING_ERROR = "VIDEO_PROCESSING_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    PROBLEM_READING_FILE = "PROBLEM_READING_FILE"
    INVALID_ISCI = "INVALID_ISCI"
    INVALID_AD_ID = "INVALID_AD_ID"


# --- Errors ---


class AudioError(ApiError, tag="AudioError"):
    reason: OpenEnum[AudioErrorReason] | None = element(default=None)


class ImageError(ApiError, tag="ImageError"):
    reason: OpenEnum[ImageErrorReason] | None = element(default=None)


class MediaBundleError(ApiError, tag="MediaBundleError"):
    reason: OpenEnum[MediaBundleErrorReason] | None = element(default=None)


class MediaError(ApiError, tag="MediaError"):
    reason: OpenEnum[MediaErrorReason] | None = element(default=None)


class VideoError(ApiError, tag="VideoError"):
    reason: OpenEnum[VideoErrorReason] | None = element(default=None)


# --- Media ---


class Dimensions(CmModel, tag="Dimensions"):
    width: int | None = element(tag="width", default=None)
    height: int | None = element(tag="height", default=None)


class MediaSizeDimensionsMapEntry(CmModel, tag="Media_Size_DimensionsMapEntry"):
    key: OpenEnum[MediaSize] | None = element(tag="key", default=None)
    value: Dimensions | None = element(tag="value", default=None)


class MediaSizeStringMapEntry(CmModel, tag="Media_Size_StringMapEntry"):
    key: OpenEnum[MediaSize] | None = element(tag="key", default=None)
    value: str | None = element(tag="value", default=None)


class Media(CmModel, tag="Media", discriminator="Media.Type"):
    """
    Base of every media entry.

    ``dimensions`` and ``urls`` are keyed by MediaSize; the server fills them
    in for stored media.
    """

    media_id: int | None = element(tag="mediaId", default=None)
    type: OpenEnum[MediaMediaType] | None = element(tag="type", default=None)
    reference_id: int | None = element(tag="referenceId", default=None)
    dimensions: list[MediaSizeDimensionsMapEntry] = element(tag="dimensions", default=[])
    urls: list[MediaSizeStringMapEntry] = element(tag="urls", default=[])
    mime_type: OpenEnum[MediaMimeType] | None = element(tag="mimeType", default=None)
    source_url: str | None = element(tag="sourceUrl", default=None)
    name: str | None = element(tag="name", default=None)
    file_size: int | None = element(tag="fileSize", default=None)
    creation_time: str | None = element(tag="creationTime", default=None)
    media_type: str | None = element(tag="Media.Type", default=None)

    def url_for(self, size: MediaSize) -> str | None:
        for entry in self.urls:
            if entry.key == size:
                return entry.value
        return None


class Image(Media, tag="Image"):
    """Image media; ``data`` travels base64 encoded."""

    data: Base64Bytes | None = element(tag="data", default=None)


class Video(Media, tag="Video"):
    duration_millis: int | None = element(tag="durationMillis", default=None)
    streaming_url: str | None = element(tag="streamingUrl", default=None)
    ready_to_play_on_the_web: bool | None = element(tag="readyToPlayOnTheWeb", default=None)
    industry_standard_commercial_identifier: str | None = element(
        tag="industryStandardCommercialIdentifier", default=None
    )
    advertising_id: str | None = element(tag="advertisingId", default=None)
    you_tube_video_id_string: str | None = element(tag="youTubeVideoIdString", default=None)


class Audio(Media, tag="Audio"):
    duration_millis: int | None = element(tag="durationMillis", default=None)
    streaming_url: str | None = element(tag="streamingUrl", default=None)
    ready_to_play_on_the_web: bool | None = element(tag="readyToPlayOnTheWeb", default=None)


class MediaBundle(Media, tag="MediaBundle"):
    """A zipped HTML5 bundle; ``data`` travels base64 encoded."""

    data: Base64Bytes | None = element(tag="data", default=None)
    media_bundle_url: str | None = element(tag="mediaBundleUrl", default=None)
    entry_point: str | None = element(tag="entryPoint", default=None)


class MediaPage(CmModel, tag="MediaPage"):
    entries: list[Media] = element(tag="entries", default=[])
    total_num_entries: int | None = element(tag="totalNumEntries", default=None)


# --- get ---


class Get(CmModel, tag="get"):
    service_selector: Selector | None = element(tag="serviceSelector", default=None)


class GetResponse(CmModel, tag="getResponse"):
    rval: MediaPage | None = element(tag="rval", default=None)


# --- query ---


class Query(CmModel, tag="query"):
    query: str | None = element(tag="query", default=None)


class QueryResponse(CmModel, tag="queryResponse"):
    rval: MediaPage | None = element(tag="rval", default=None)


# --- upload ---


class Upload(CmModel, tag="upload"):
    """Request model for upload; pass Image, Video, Audio or MediaBundle entries."""

    media: list[Media] = element(tag="media", default=[])


class UploadResponse(CmModel, tag="uploadResponse"):
    rval: list[Media] = element(tag="rval", default=[])
