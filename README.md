# rtsptracks

Describe the media tracks of an RTSP session as SDP media sections.

`rtsptracks` builds track descriptions for H264 video, reads the H264
parameter sets back out of them, tells H264 and AAC tracks apart, works
out clock rates and per-track control URLs, and writes a list of tracks
as an SDP document suitable for an RTSP `ANNOUNCE` or `DESCRIBE` body.

## Installation

```
pip install rtsptracks
```

For running the test suite:

```
pip install "rtsptracks[test]"
pytest
```

## Usage

### Creating an H264 track

```python
from rtsptracks.track import TrackConfigH264, Tracks, new_track_h264

conf = TrackConfigH264(sps=b"\x67\x64\x00\x1f", pps=b"\x68\xee\x3c\x80")
track = new_track_h264(96, conf)

track.is_h264()                       # True
track.clock_rate()                    # 90000
track.extract_config_h264() == conf   # True
```

`new_track_h264` raises `ValueError` for an SPS shorter than four bytes
and for a payload type outside 0–255. The track gets an `rtpmap`
attribute of `96 H264/90000` and an `fmtp` attribute carrying
`packetization-mode=1`, the base64 `sprop-parameter-sets` and the
`profile-level-id` taken from bytes 1–3 of the SPS.

`extract_config_h264()` raises `ValueError` when the `fmtp` attribute is
missing or malformed, or when `sprop-parameter-sets` is missing or is not
valid base64.

### Inspecting a media description

Each track wraps a `MediaDescription` made of a `MediaName` and a list of
`Attribute` entries:

```python
track.media.media_name.media     # "video"
track.media.attribute("rtpmap")  # "96 H264/90000"
print(track.media.marshal())     # the m= and a= lines of this track
```

`MediaDescription.attribute(key)` returns the value of the first
attribute with that key, or `None`.

`Track.is_aac()` tells whether a track is an audio track whose `rtpmap`
encoding is `mpeg4-generic/...` (case-insensitive).

### Clock rates

`Track.clock_rate()` uses the static RTP payload types (for example 0 →
8000, 14 → 90000) and otherwise reads the clock rate from the `rtpmap`
attribute (`<type> <encoding>/<clock rate>[/<params>]`). It raises
`ValueError` when no format is listed, when `rtpmap` is missing, or when
it cannot be parsed.

### Track URLs

`Track.url(base_url)` resolves the track's `control` attribute against
the session URL, given as a string:

- an empty base URL raises `ValueError`;
- without a `control` attribute the base URL is returned unchanged;
- an absolute `rtsp://` control keeps its path and query but takes the
  host and credentials of the base URL;
- any other control is appended to the base URL, with a `/` inserted
  first unless the control starts with `?` or the base URL already ends
  with `/`.

### Writing SDP

```python
tracks = Tracks([track])
sdp_bytes = tracks.write()
```

The session carries the name `Stream`, an `IN IP4 127.0.0.1` origin, an
`IN IP4 0.0.0.0` connection line and a `0 0` timing line, followed by
every track's media section. Lines end with CRLF.

### Transports

```python
from rtsptracks.transport import Transport

str(Transport.UDP)            # "UDP"
str(Transport.UDP_MULTICAST)  # "UDP-multicast"
str(Transport.TCP)            # "TCP"
str(Transport(15))            # "unknown"
```

## What this package does not do

- It does not parse SDP documents into tracks; tracks are built in code.
- It does not create AAC tracks or decode AAC audio configuration; it
  only recognises AAC tracks.
- It opens no network connections: there is no RTSP client or server.