# engine/exceptions.py

class ForecastContractError(ValueError):
    pass


class UnknownForecastMethod(ForecastContractError):
    def __init__(self, method: object):
        super().__init__(f"Unknown forecasting method: {method!r}")
        self.method = method


class InvalidPeriod(ForecastContractError):
    def __init__(self, value: object):
        super().__init__(f"Invalid period key (expected MM/YYYY): {value!r}")
        self.value = value


class UnsupportedConfidenceLevel(ForecastContractError):
    def __init__(self, level: object, supported: tuple[float, ...]):
        super().__init__(f"Unsupported confidence level {level!r}; supported: {supported}")
        self.level = level
