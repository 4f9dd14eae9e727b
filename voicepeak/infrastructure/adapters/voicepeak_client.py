from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Union

from voicepeak.application.interfaces.speech_synth import ISpeechSynthesizer
from voicepeak.core.config import settings
from voicepeak.core.exceptions import ExecutableNotFoundError, InvalidArgumentError
from voicepeak.core.pyd_schemas import Narrator
from voicepeak.utils.subprocess_utils import run_tool, split_lines

logger = logging.getLogger(__name__)


class VoicepeakClient(ISpeechSynthesizer):
    """
    Async client for the VOICEPEAK command-line executable.

    Every operation launches the executable once (``get_narrator_list`` launches
    it once per narrator plus one listing call) and waits for it to exit without
    blocking the event loop. The client holds no state besides the executable
    path, so one instance can be shared freely.

    Attributes:
        exe_path (str): Validated path to the executable.
        timeout (float | None): Seconds to wait for each call, None waits forever.
            Falls back to settings.timeout; 0 or less disables it.

    Examples:
        client = VoicepeakClient("/opt/voicepeak/voicepeak")
        await client.say_text("hello", output_path="hello.wav", speed=120)
        narrators = await client.get_narrator_list()
    """

    SPEED_RANGE = (50, 200)
    PITCH_RANGE = (-300, 300)

    def __init__(
        self, exe_path: str | None = None, *, timeout: float | None = None
    ) -> None:
        path = str(exe_path or settings.exe_path)
        if not Path(path).is_file():
            raise ExecutableNotFoundError(path)
        self._exe_path = path
        if timeout is None:
            timeout = settings.timeout
        # 0 or less waits forever, even when settings carry a timeout
        self._timeout = timeout if timeout is not None and timeout > 0 else None

    @property
    def exe_path(self) -> str:
        return self._exe_path

    @property
    def timeout(self) -> float | None:
        return self._timeout

    async def _run_command(
        self, args: Sequence[str], operation_name: str = "VOICEPEAK command"
    ) -> str:
        """Run the executable off the event loop and return its stdout."""
        return await asyncio.to_thread(
            run_tool,
            self._exe_path,
            list(args),
            timeout=self._timeout,
            operation_name=operation_name,
            encoding=settings.output_encoding,
            custom_logger=logger,
        )

    def make_speech_command(
        self,
        *,
        text: str | None = None,
        text_file: str | None = None,
        output_path: str | None = None,
        narrator: Union[Narrator, str, None] = None,
        emotions: Mapping[str, int] | None = None,
        speed: int | None = None,
        pitch: int | None = None,
    ) -> List[str]:
        """Build the argument list for a speech invocation.

        Args:
            text: Text to speak. Mutually exclusive with text_file.
            text_file: Path to a text file to speak. Mutually exclusive with text.
            output_path: Where the output audio file is written.
            narrator: Narrator (or narrator name) to speak with.
            emotions: Emotion intensities; only used together with a narrator.
            speed: Speech speed, applied only within 50..200.
            pitch: Speech pitch, applied only within -300..300.

        Returns:
            Argument list, flags ordered text/file, output, narrator, speed, pitch.

        Raises:
            InvalidArgumentError: If both or neither of text and text_file are given.
        """
        if text and text_file:
            raise InvalidArgumentError(
                "You can only specify one of text or text_file",
                fields=["text", "text_file"],
            )

        if text:
            args = ["-s", text]
        elif text_file:
            args = ["-t", str(text_file)]
        else:
            raise InvalidArgumentError(
                "You must specify either text or text_file",
                fields=["text", "text_file"],
            )

        if output_path:
            args += ["-o", str(output_path)]

        if narrator is not None:
            name = narrator.name if isinstance(narrator, Narrator) else str(narrator)
            args += ["-n", name]
            if emotions:
                args += ["-e", ",".join(f"{k}={v}" for k, v in emotions.items())]

        # Out-of-range values are dropped, not rejected
        if speed is not None and self.SPEED_RANGE[0] <= speed <= self.SPEED_RANGE[1]:
            args += ["--speed", str(speed)]

        if pitch is not None and self.PITCH_RANGE[0] <= pitch <= self.PITCH_RANGE[1]:
            args += ["--pitch", str(pitch)]

        return args

    async def say_text(
        self,
        text: str,
        output_path: str | None = None,
        narrator: Union[Narrator, str, None] = None,
        emotions: Mapping[str, int] | None = None,
        speed: int | None = None,
        pitch: int | None = None,
    ) -> None:
        """Speak `text`. Without output_path the tool picks its own destination."""
        args = self.make_speech_command(
            text=text,
            output_path=output_path,
            narrator=narrator,
            emotions=emotions,
            speed=speed,
            pitch=pitch,
        )
        await self._run_command(args, "Speak text")

    async def say_text_file(
        self,
        text_path: str,
        output_path: str | None = None,
        narrator: Union[Narrator, str, None] = None,
        emotions: Mapping[str, int] | None = None,
        speed: int | None = None,
        pitch: int | None = None,
    ) -> None:
        """Speak the contents of `text_path`.

        Output goes to settings.default_output_path when output_path is None;
        an empty string sends no -o flag and leaves the destination to the tool.
        """
        args = self.make_speech_command(
            text_file=text_path,
            output_path=(
                settings.default_output_path if output_path is None else output_path
            ),
            narrator=narrator,
            emotions=emotions,
            speed=speed,
            pitch=pitch,
        )
        await self._run_command(args, f"Speak text file {text_path}")

    async def get_narrator_list(self) -> List[Narrator]:
        """Return every installed narrator together with its emotions."""
        narrators: List[Narrator] = []
        for name in await self.get_narrator_name_list():
            emotions = await self.get_emotion_list(name)
            narrators.append(Narrator(name, emotions))
        logger.debug("Found %d narrators", len(narrators))
        return narrators

    async def get_narrator_name_list(self) -> List[str]:
        output = await self._run_command(["--list-narrator"], "List narrators")
        return split_lines(output)

    async def get_emotion_list(self, name: str) -> List[str]:
        output = await self._run_command(
            ["--list-emotion", name], f"List emotions for {name}"
        )
        return split_lines(output)
