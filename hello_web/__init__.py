"""hello-web: health-check and greeting HTTP service."""
