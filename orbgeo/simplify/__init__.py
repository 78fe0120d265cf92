"""Line simplification: Douglas-Peucker, radial distance and Visvalingam-Whyatt."""

__all__ = ["base", "douglas_peucker", "radial", "visvalingam"]