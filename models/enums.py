from enum import Enum


class CriterionKey(str, Enum):
    PRICE = "price"
    BEDROOMS = "bedrooms"
    BATHROOMS = "bathrooms"
    GARDEN = "hasGarden"
    STUDENT = "isStudent"
    PROPERTY_TYPE = "propertyType"
    LOCATION = "location"
    ROOMS = "rooms"


class RoomCheck(str, Enum):
    MIN_DOUBLE_ROOMS = "minDoubleRooms"
    MIN_ENSUITE_ROOMS = "minEnsuiteRooms"
    SIMILAR_SIZED_ROOMS = "similarSizedRooms"
    HAS_MASTER_BEDROOM = "hasMasterBedroom"


class FurnishedStatus(str, Enum):
    FURNISHED = "Furnished"
    UNFURNISHED = "Unfurnished"
    PART_FURNISHED = "Part Furnished"
