class DomainException(Exception):
    """Base exception raised by the domain layer"""

    pass


class ResourceNotFoundException(DomainException):
    """A requested resource does not exist"""

    pass


class BusinessRuleViolationException(DomainException):
    """A business rule was violated"""

    pass


class DuplicateResourceException(DomainException):
    """A resource with the same identity already exists"""

    pass
