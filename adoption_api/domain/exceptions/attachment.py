"""
AttachmentReadError - An uploaded picture had no readable binary content.
Maps to: HTTP 500 (fault, not a business outcome)
"""


class AttachmentReadError(Exception):
    def __init__(self, index: int, reason: str = "no readable binary content"):
        super().__init__(f"Attachment {index}: {reason}")
        self.index = index
        self.reason = reason
