class RegistryException(Exception):
    pass


class TransactionFormattingError(RegistryException):
    pass


class ContractNotDeployed(RegistryException):
    pass


class ContractMismatch(RegistryException):
    pass


class UnknownContractSource(RegistryException):
    pass


class ContractExecutionError(RegistryException):
    pass


class ConfigError(RegistryException):
    pass
