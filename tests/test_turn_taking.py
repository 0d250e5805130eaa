import pytest

from app.voice.turn_taking import (
    FLOOR_DB, RestartRecognizer, TurnState, TurnTakingController, UserSpeakingChanged, UserTurnCompleted,
    audio_level_db
)

LOUD = -30.0
QUIET = -60.0
ANSWER = "I designed and shipped a streaming data pipeline that cut our reporting latency by forty percent"


def speak(controller, start, end, level=LOUD):
    events = []
    for now in range(start, end + 1, 100):
        events += controller.sample(level, now)
    return events


def test_audio_level_db():
    assert audio_level_db([255, 255]) == pytest.approx(0.0)
    assert audio_level_db([0, 0, 0]) == FLOOR_DB
    assert audio_level_db([]) == FLOOR_DB
    assert audio_level_db([1, 1]) < -42


def test_full_user_turn():
    c = TurnTakingController()

    assert c.sample(LOUD, 0) == [UserSpeakingChanged(True)]
    assert c.state == TurnState.USER_SPEAKING
    assert speak(c, 100, 900) == []

    c.add_final_transcript(ANSWER, 950)
    assert c.sample(QUIET, 1000) == [UserSpeakingChanged(False)]
    assert c.silence_check_at == 2500

    assert c.poll(2400) == []
    assert c.poll(2500) == [UserTurnCompleted(ANSWER)]
    assert c.speech_buffer == ""
    assert c.state == TurnState.IDLE


def test_short_utterance_is_not_a_turn():
    c = TurnTakingController()
    speak(c, 0, 200)
    c.add_final_transcript("Um", 250)
    c.sample(QUIET, 300)

    assert c.poll(1800) == []
    assert c.speech_buffer == "Um "


def test_speech_resuming_before_check_keeps_turn_open():
    c = TurnTakingController()
    speak(c, 0, 900)
    c.add_final_transcript(ANSWER, 950)
    c.sample(QUIET, 1000)
    c.sample(LOUD, 1500)
    c.sample(QUIET, 1600)

    # The check moved to 1500 ms after the second pause
    assert c.poll(2500) == []
    assert c.poll(3100) == [UserTurnCompleted(ANSWER)]


def test_silence_without_transcript_schedules_nothing():
    c = TurnTakingController()
    speak(c, 0, 500)
    c.sample(QUIET, 600)
    assert c.silence_check_at is None


def test_samples_ignored_while_ai_speaks():
    c = TurnTakingController()
    c.sample(LOUD, 0)

    assert c.ai_started(100) == [UserSpeakingChanged(False)]
    assert c.state == TurnState.AI_SPEAKING
    assert c.sample(LOUD, 200) == []
    assert c.user_speaking is False


def test_recognizer_restarts_after_ai_finishes():
    c = TurnTakingController()
    c.ai_started(0)
    c.ai_finished(1000)

    assert c.poll(1200) == []
    assert c.poll(1300) == [RestartRecognizer()]
    assert c.poll(1400) == []


def test_ai_speaking_cancels_pending_restart():
    c = TurnTakingController()
    c.recognizer_ended(0)
    c.ai_started(50)
    assert c.poll(500) == []


def test_recognizer_errors():
    c = TurnTakingController()
    assert c.recognizer_error("no-speech", 0) == []
    assert c.restart_at is None

    c.recognizer_error("network", 0)
    assert c.restart_at == 100
    assert c.poll(100) == [RestartRecognizer()]


def test_earliest_restart_wins():
    c = TurnTakingController()
    c.ai_finished(0)
    c.recognizer_ended(0)
    assert c.restart_at == 100


def test_stop_silences_everything():
    c = TurnTakingController()
    speak(c, 0, 900)
    c.add_final_transcript(ANSWER, 950)
    c.sample(QUIET, 1000)
    c.stop()

    assert c.sample(LOUD, 1100) == []
    assert c.poll(5000) == []
    assert c.recognizer_ended(5000) == []
    assert c.restart_at is None
