class StockNewsError(Exception):
    pass


class ValidationError(StockNewsError):
    pass


class ExternalServiceError(StockNewsError):
    pass


class ProviderError(ExternalServiceError):
    pass


class TranslationError(ExternalServiceError):
    pass
