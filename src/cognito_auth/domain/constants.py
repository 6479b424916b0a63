from enum import Enum


class Operation(Enum):
    SIGN_UP = "sign_up"
    CONFIRM_SIGN_UP = "confirm_sign_up"
    SIGN_IN = "sign_in"
    SIGN_OUT = "sign_out"
    GET_USER = "get_user"
    CHANGE_PASSWORD = "change_password"
    DELETE_USER = "delete_user"
    UPDATE_USER_ATTRIBUTES = "update_user_attributes"
    FORGOT_PASSWORD = "forgot_password"
    CONFIRM_FORGOT_PASSWORD = "confirm_forgot_password"
    GET_USER_ATTRIBUTE_VERIFICATION_CODE = "get_user_attribute_verification_code"
    VERIFY_USER_ATTRIBUTE = "verify_user_attribute"


class AuthFlow(str, Enum):
    USER_PASSWORD_AUTH = "USER_PASSWORD_AUTH"


class Region(str, Enum):
    """AWS regions with Cognito user pools."""

    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    CA_CENTRAL_1 = "ca-central-1"
    SA_EAST_1 = "sa-east-1"
    EU_CENTRAL_1 = "eu-central-1"
    EU_CENTRAL_2 = "eu-central-2"
    EU_NORTH_1 = "eu-north-1"
    EU_SOUTH_1 = "eu-south-1"
    EU_SOUTH_2 = "eu-south-2"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    AP_EAST_1 = "ap-east-1"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_NORTHEAST_3 = "ap-northeast-3"
    AP_SOUTH_1 = "ap-south-1"
    AP_SOUTH_2 = "ap-south-2"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_SOUTHEAST_3 = "ap-southeast-3"
    AP_SOUTHEAST_4 = "ap-southeast-4"
    IL_CENTRAL_1 = "il-central-1"
    ME_CENTRAL_1 = "me-central-1"
    ME_SOUTH_1 = "me-south-1"
    AF_SOUTH_1 = "af-south-1"


# Wire protocol
AMZ_JSON_CONTENT_TYPE = "application/x-amz-json-1.1"
TARGET_HEADER = "X-Amz-Target"
TARGET_PREFIX = "AWSCognitoIdentityProviderService"
