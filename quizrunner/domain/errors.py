# quizrunner/domain/errors.py


class QuizLoadError(Exception):
    """Base for every failure that lands the controller in the error phase."""


class NotFoundError(QuizLoadError):
    def __init__(self, quiz_id: str, resource: str):
        self.quiz_id = quiz_id
        self.resource = resource
        super().__init__(
            f'Quiz "{quiz_id}" not found (404). '
            f'Make sure the file "{resource}" is in the content folder.'
        )


class FormatError(QuizLoadError):
    def __init__(self, message: str = "The file looks empty or badly formatted."):
        super().__init__(message)


class InvalidTransition(RuntimeError):
    pass
