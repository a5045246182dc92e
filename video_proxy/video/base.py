# video_proxy/video/base.py

from abc import ABC, abstractmethod


class Video(ABC):
    """
    Общий интерфейс видео: реальный объект и его заместитель
    взаимозаменяемы для вызывающего кода.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str):
        """
        :param name: имя файла видео (неизменяемый идентификатор)
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def play(self) -> None:
        """
        Воспроизводит видео.
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """
        Возвращает строку с именем и размером видео.
        """
        ...

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name})"

    def __str__(self):
        return self.name
