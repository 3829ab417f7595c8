"""Router collaborator used for post-action navigation."""


class RedirectRouter:
    """Records where the last action wants to navigate.

    Views call the core with one of these and then answer with
    ``redirect(router.location)`` when it is set.
    """

    def __init__(self):
        self.location = None
        self.history = []

    def push(self, path):
        self.location = path
        self.history.append(path)
