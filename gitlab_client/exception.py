class GitLabClientException(Exception):
    pass


class ProjectReferenceException(GitLabClientException):
    pass


class TransportException(GitLabClientException):
    pass


class DecodingException(GitLabClientException):
    pass


class APIException(GitLabClientException):
    def __init__(self, message: str, response=None):
        super().__init__(message, response)
        self.response = response

    @property
    def status_code(self):
        if self.response is not None:
            return self.response.status_code

    def __str__(self):
        return self.args[0]


class NotFoundException(APIException):
    pass
