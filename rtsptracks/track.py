"""RTSP tracks described by SDP media descriptions."""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from urllib.parse import SplitResult, urlsplit, urlunsplit

_CLOCK_RATES = {
    **dict.fromkeys(("0", "1", "2", "3", "4", "5", "7", "8", "9", "12", "13", "15", "18"), 8000),
    "6": 16000,
    **dict.fromkeys(("10", "11"), 44100),
    **dict.fromkeys(("14", "25", "26", "28", "31", "32", "33", "34"), 90000),
    "16": 11025,
    "17": 22050,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class Attribute:
    """An SDP attribute (a=key:value)."""

    key: str
    value: str = ""

    def marshal(self) -> str:
        return f"{self.key}:{self.value}" if self.value else self.key


@dataclass
class MediaName:
    """The m= line of an SDP media description."""

    media: str
    protos: list[str] = field(default_factory=list)
    formats: list[str] = field(default_factory=list)
    port: int = 0


@dataclass
class MediaDescription:
    """An SDP media description."""

    media_name: MediaName
    attributes: list[Attribute] = field(default_factory=list)
    bandwidth: list[str] = field(default_factory=list)

    def attribute(self, key: str) -> str | None:
        """Return the value of the first attribute with this key, or None."""
        return next((a.value for a in self.attributes if a.key == key), None)

    def marshal(self) -> str:
        """Encode the media description as SDP lines."""
        name = self.media_name
        lines = [
            f"m={name.media} {name.port} {'/'.join(name.protos)} {' '.join(name.formats)}"
        ]
        lines.extend(f"b={b}" for b in self.bandwidth)
        lines.extend(f"a={a.marshal()}" for a in self.attributes)
        return "".join(line + "\r\n" for line in lines)


@dataclass
class TrackConfigH264:
    """The configuration of an H264 track."""

    sps: bytes
    pps: bytes


def _parse_url(text: str) -> SplitResult:
    try:
        parts = urlsplit(text)
    except ValueError as exc:
        raise ValueError(f"invalid URL ({text}): {exc}") from exc
    if parts.scheme != "rtsp":
        raise ValueError(f"unsupported scheme '{parts.scheme}'")
    if any(ch.isspace() for ch in parts.netloc):
        raise ValueError(f"invalid host in URL ({text})")
    return parts


@dataclass
class Track:
    """An RTSP track."""

    media: MediaDescription

    def url(self, base_url: str | None) -> str:
        """Return the URL of the track, built from the base URL and the control attribute."""
        if not base_url:
            raise ValueError("empty base URL")

        control = self.media.attribute("control") or ""
        if not control:
            return base_url

        if control.startswith("rtsp://"):
            parts = _parse_url(control)
            base_parts = urlsplit(base_url)
            return urlunsplit(parts._replace(netloc=base_parts.netloc))

        if not control.startswith("?") and not base_url.endswith("/"):
            base_url += "/"
        return base_url + control

    def clock_rate(self) -> int:
        """Return the clock rate of the track."""
        formats = self.media.media_name.formats
        if not formats:
            raise ValueError("no formats provided")

        rate = _CLOCK_RATES.get(formats[0])
        if rate is not None:
            return rate

        rtpmap = self.media.attribute("rtpmap")
        if rtpmap is None:
            raise ValueError("attribute 'rtpmap' not found")

        fields = rtpmap.split(" ")
        if len(fields) < 2:
            raise ValueError(f"invalid rtpmap ({rtpmap})")
        encoding = fields[1].split("/")
        if len(encoding) not in (2, 3):
            raise ValueError(f"invalid rtpmap ({rtpmap})")
        if not _INTEGER.fullmatch(encoding[1]):
            raise ValueError(f"invalid clock rate ({encoding[1]})")
        return int(encoding[1])

    def is_h264(self) -> bool:
        """Tell whether the track is an H264 track."""
        if self.media.media_name.media != "video":
            return False
        rtpmap = self.media.attribute("rtpmap")
        if rtpmap is None:
            return False
        fields = rtpmap.strip().split(" ")
        return len(fields) == 2 and fields[1] == "H264/90000"

    def extract_config_h264(self) -> TrackConfigH264:
        """Extract the SPS and PPS of an H264 track from its fmtp attribute."""
        fmtp = self.media.attribute("fmtp")
        if fmtp is None:
            raise ValueError("fmtp attribute is missing")

        head = fmtp.split(" ", 1)
        if len(head) != 2:
            raise ValueError(f"invalid fmtp attribute ({fmtp})")

        for kv in head[1].split(";"):
            kv = kv.strip(" ")
            if not kv:
                continue
            pair = kv.split("=", 1)
            if len(pair) != 2:
                raise ValueError(f"invalid fmtp attribute ({fmtp})")
            key, value = pair
            if key != "sprop-parameter-sets":
                continue

            sets = value.split(",", 1)
            if len(sets) != 2:
                raise ValueError(f"invalid sprop-parameter-sets ({fmtp})")
            try:
                sps = base64.b64decode(sets[0], validate=True)
                pps = base64.b64decode(sets[1], validate=True)
            except (binascii.Error, ValueError) as exc:
                raise ValueError(f"invalid sprop-parameter-sets ({fmtp})") from exc
            return TrackConfigH264(sps=sps, pps=pps)

        raise ValueError(f"sprop-parameter-sets is missing ({fmtp})")

    def is_aac(self) -> bool:
        """Tell whether the track is an AAC track."""
        if self.media.media_name.media != "audio":
            return False
        rtpmap = self.media.attribute("rtpmap")
        if rtpmap is None:
            return False
        fields = rtpmap.split(" ")
        return len(fields) == 2 and fields[1].lower().startswith("mpeg4-generic/")


def new_track_h264(payload_type: int, conf: TrackConfigH264) -> Track:
    """Create an H264 track with the given payload type and configuration."""
    if not 0 <= payload_type <= 255:
        raise ValueError(f"invalid payload type ({payload_type})")
    if len(conf.sps) < 4:
        raise ValueError("invalid SPS")

    sprop = (
        base64.b64encode(conf.sps).decode("ascii")
        + ","
        + base64.b64encode(conf.pps).decode("ascii")
    )
    profile_level_id = conf.sps[1:4].hex().upper()
    typ = str(payload_type)

    return Track(
        media=MediaDescription(
            media_name=MediaName(media="video", protos=["RTP", "AVP"], formats=[typ]),
            attributes=[
                Attribute("rtpmap", f"{typ} H264/90000"),
                Attribute(
                    "fmtp",
                    f"{typ} packetization-mode=1; "
                    f"sprop-parameter-sets={sprop}; "
                    f"profile-level-id={profile_level_id}",
                ),
            ],
        )
    )


class Tracks(list):
    """A list of tracks."""

    def write(self) -> bytes:
        """Encode the tracks into an SDP session description."""
        lines = [
            "v=0",
            "o=- 0 0 IN IP4 127.0.0.1",
            "s=Stream",
            # required by Darwin Streaming Server
            "c=IN IP4 0.0.0.0",
            "t=0 0",
        ]
        session = "".join(line + "\r\n" for line in lines)
        return (session + "".join(track.media.marshal() for track in self)).encode("utf-8")