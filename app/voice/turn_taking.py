"""
Turn-taking for the natural voice interview.

The voice client samples microphone loudness every 100 ms and feeds final
speech-recognition results in as they arrive. This controller decides when
the candidate has finished a turn (enough speech, then 1.5 s of silence)
and when the recognizer should be restarted.

It holds no clock and no timers of its own: every call takes `now` in
milliseconds, and scheduled work fires from `poll(now)`. That keeps it
deterministic and independent of the host running the audio loop.

Usage:
    controller = TurnTakingController()
    every 100 ms:
        events = controller.sample(audio_level_db(bins), now)
        events += controller.poll(now)
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

SPEECH_THRESHOLD_DB = -42.0
SILENCE_THRESHOLD_DB = -50.0
SILENCE_DURATION_MS = 1500
MIN_SPEECH_DURATION_MS = 600
SAMPLE_INTERVAL_MS = 100
RECOGNIZER_RESTART_DELAY_MS = 100
POST_SPEECH_RESTART_DELAY_MS = 300

# Each buffered character counts as 10 ms of speech
MS_PER_BUFFERED_CHAR = 10
FLOOR_DB = -100.0

IGNORED_RECOGNIZER_ERRORS = frozenset({"no-speech", "aborted"})


def audio_level_db(frequency_bins: Sequence[int]) -> float:
    """Mean byte magnitude (0-255) of an analyser frame, in dBFS."""
    if not frequency_bins:
        return FLOOR_DB
    average = sum(frequency_bins) / len(frequency_bins)
    if average <= 0:
        return FLOOR_DB
    return 20 * math.log10(average / 255)


class TurnState(str, Enum):
    IDLE = "idle"
    AI_SPEAKING = "ai_speaking"
    USER_SPEAKING = "user_speaking"


@dataclass(frozen=True)
class UserSpeakingChanged:
    speaking: bool


@dataclass(frozen=True)
class UserTurnCompleted:
    text: str


@dataclass(frozen=True)
class RestartRecognizer:
    pass


class TurnTakingController:
    """State machine over IDLE / AI_SPEAKING / USER_SPEAKING."""

    def __init__(self):
        self.active = True
        self.ai_speaking = False
        self.user_speaking = False
        self.speech_buffer = ""
        self.last_user_speech_time = 0
        self.last_sound_detected = 0
        self.silence_check_at: Optional[int] = None
        self.restart_at: Optional[int] = None

    @property
    def state(self) -> TurnState:
        if self.ai_speaking:
            return TurnState.AI_SPEAKING
        if self.user_speaking:
            return TurnState.USER_SPEAKING
        return TurnState.IDLE

    def _user_stopped(self) -> List[object]:
        if not self.user_speaking:
            return []
        self.user_speaking = False
        return [UserSpeakingChanged(False)]

    def _schedule_restart(self, at: int) -> None:
        if self.restart_at is None or at < self.restart_at:
            self.restart_at = at

    # -- interviewer speech --------------------------------------------

    def ai_started(self, now: int) -> List[object]:
        self.ai_speaking = True
        self.restart_at = None
        return self._user_stopped()

    def ai_finished(self, now: int) -> List[object]:
        self.ai_speaking = False
        if self.active:
            self._schedule_restart(now + POST_SPEECH_RESTART_DELAY_MS)
        return []

    # -- candidate speech ----------------------------------------------

    def add_final_transcript(self, text: str, now: int) -> None:
        if not text:
            return
        self.speech_buffer += text + " "
        self.last_user_speech_time = now

    def sample(self, level_db: float, now: int) -> List[object]:
        """Feed one loudness sample. Samples taken while the AI speaks are dropped."""
        if not self.active:
            return []
        if self.ai_speaking:
            return self._user_stopped()

        speaking = level_db > SPEECH_THRESHOLD_DB
        if speaking:
            self.last_sound_detected = now

        if speaking == self.user_speaking:
            return []

        self.user_speaking = speaking
        if not speaking and self.speech_buffer.strip():
            self.silence_check_at = now + SILENCE_DURATION_MS
        return [UserSpeakingChanged(speaking)]

    def speech_duration(self) -> int:
        return (
            self.last_sound_detected
            - self.last_user_speech_time
            + MS_PER_BUFFERED_CHAR * len(self.speech_buffer)
        )

    def poll(self, now: int) -> List[object]:
        """Fire any silence check or recognizer restart that is due."""
        events: List[object] = []

        if self.silence_check_at is not None and now >= self.silence_check_at:
            self.silence_check_at = None
            text = self.speech_buffer.strip()
            if (
                text
                and now - self.last_sound_detected >= SILENCE_DURATION_MS
                and self.speech_duration() >= MIN_SPEECH_DURATION_MS
            ):
                self.speech_buffer = ""
                events.append(UserTurnCompleted(text))

        if self.restart_at is not None and now >= self.restart_at:
            self.restart_at = None
            if self.active and not self.ai_speaking:
                events.append(RestartRecognizer())

        return events

    # -- recognizer lifecycle ------------------------------------------

    def recognizer_error(self, error: str, now: int) -> List[object]:
        if error in IGNORED_RECOGNIZER_ERRORS:
            return []
        return self.recognizer_ended(now)

    def recognizer_ended(self, now: int) -> List[object]:
        if self.active and not self.ai_speaking:
            self._schedule_restart(now + RECOGNIZER_RESTART_DELAY_MS)
        return []

    def stop(self) -> None:
        self.active = False
        self.ai_speaking = False
        self.user_speaking = False
        self.silence_check_at = None
        self.restart_at = None
