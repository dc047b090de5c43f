from abc import ABC, abstractmethod


class MailerPort(ABC):
    @abstractmethod
    def send_html(self, to: str, subject: str, html: str) -> None:
        raise NotImplementedError
