"""Audio features and audio analysis records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import Modality


@dataclass(frozen=True, slots=True)
class AudioFeatures:
    id: str
    acousticness: float
    danceability: float
    duration_ms: int
    energy: float
    instrumentalness: float
    key: int
    liveness: float
    loudness: float
    mode: Modality
    speechiness: float
    tempo: float
    time_signature: int
    valence: float
    analysis_url: str | None = None
    track_href: str | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class TimeInterval:
    """A bar, beat or tatum."""

    start: float
    duration: float
    confidence: float


@dataclass(frozen=True, slots=True)
class Section:
    start: float
    duration: float
    confidence: float
    loudness: float
    tempo: float
    tempo_confidence: float
    key: int
    key_confidence: float
    mode: Modality | None
    mode_confidence: float
    time_signature: int
    time_signature_confidence: float


@dataclass(frozen=True, slots=True)
class Segment:
    start: float
    duration: float
    confidence: float
    loudness_start: float
    loudness_max: float
    loudness_max_time: float
    loudness_end: float | None
    pitches: tuple[float, ...]
    timbre: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class AnalysisTrack:
    duration: float
    loudness: float
    tempo: float
    tempo_confidence: float
    time_signature: int
    time_signature_confidence: float
    key: int
    key_confidence: float
    mode: Modality | None
    mode_confidence: float
    num_samples: int | None = None
    end_of_fade_in: float | None = None
    start_of_fade_out: float | None = None


@dataclass(frozen=True, slots=True)
class AudioAnalysis:
    track: AnalysisTrack
    bars: tuple[TimeInterval, ...] = ()
    beats: tuple[TimeInterval, ...] = ()
    sections: tuple[Section, ...] = ()
    segments: tuple[Segment, ...] = ()
    tatums: tuple[TimeInterval, ...] = ()
