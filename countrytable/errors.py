class ValidationError(ValueError):
    # Raised for bad arguments at the query boundary
    pass


class DatasetError(ValueError):
    # Raised when the static dataset is malformed
    pass
