from __future__ import annotations

from typing import List, Mapping, Optional, Protocol, Union

from voicepeak.core.pyd_schemas import Narrator


class ISpeechSynthesizer(Protocol):
    """Text-to-speech interface backed by an external synthesis tool."""

    async def say_text(
        self,
        text: str,
        output_path: Optional[str] = None,
        narrator: Optional[Union[Narrator, str]] = None,
        emotions: Optional[Mapping[str, int]] = None,
        speed: Optional[int] = None,
        pitch: Optional[int] = None,
    ) -> None:
        """Speak `text`, writing audio to `output_path`."""
        ...

    async def say_text_file(
        self,
        text_path: str,
        output_path: Optional[str] = None,
        narrator: Optional[Union[Narrator, str]] = None,
        emotions: Optional[Mapping[str, int]] = None,
        speed: Optional[int] = None,
        pitch: Optional[int] = None,
    ) -> None:
        """Speak the contents of the text file at `text_path`."""
        ...

    async def get_narrator_list(self) -> List[Narrator]: ...

    async def get_narrator_name_list(self) -> List[str]: ...

    async def get_emotion_list(self, name: str) -> List[str]: ...
