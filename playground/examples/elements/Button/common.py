"""Helpers shared by the Button examples (imported as `../common`)."""

colors = ["red", "orange", "yellow", "olive", "green"]

sizes = ["mini", "tiny", "small", "medium", "large", "big", "huge", "massive"]
