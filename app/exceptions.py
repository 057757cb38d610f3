class AppException(Exception):
    """
    Базовый класс для всех исключений приложения.
    """
    pass


class NotFoundError(AppException):
    """
    Ресурс не найден (город или точка интереса).
    """
    pass


class ValidationError(AppException):
    """
    Ошибка валидации входных данных.
    errors: имя поля -> список сообщений (пустая строка — ошибка всего тела).
    """

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("Validation failed")
        self.errors = errors


class ServiceError(AppException):
    """
    Ошибка на уровне бизнес-логики (нарушение инвариантов хранилища).
    """
    pass
