class NotifierError(Exception):
    pass


class InputError(NotifierError):
    pass


class ClientConfigError(NotifierError):
    pass


class GitHubAPIError(NotifierError):
    pass


class RepositorySearchError(NotifierError):
    pass


class SlackNotificationError(NotifierError):
    pass
