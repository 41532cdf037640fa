# Standard Library
from enum import Enum


class DeliveryType(str, Enum):
    upload = "upload"
    private = "private"
    authenticated = "authenticated"


class ResourceType(str, Enum):
    image = "image"
    video = "video"
    raw = "raw"


class Environment(str, Enum):
    development = "development"
    production = "production"
