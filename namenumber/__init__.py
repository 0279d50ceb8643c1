"""Thai name number LINE bot (Flask app lives in `namenumber.factory`)."""
