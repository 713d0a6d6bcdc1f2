from enum import Enum

CLIENT_ID_FIELD = "client_id"
CLIENT_SECRET_FIELD = "client_secret"


class ParsedSecretType(Enum):
    SHARED_SECRET = "SharedSecret"
    X509_CERTIFICATE = "X509Certificate"
