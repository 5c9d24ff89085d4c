"""RTSP track descriptions in SDP: H264 tracks, clock rates, track URLs and transports."""

__version__ = "0.1.0"
__all__ = ["track", "transport"]