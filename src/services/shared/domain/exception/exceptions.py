class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    def __init__(self, resource: str, id: object) -> None:
        super().__init__(f"{resource} not found: {id}")
        self.resource = resource
        self.id = id


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass
