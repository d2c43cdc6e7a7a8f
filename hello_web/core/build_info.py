"""
Build metadata baked into the image.

Release tooling rewrites these constants at image build time (e.g. a Dockerfile
`sed` step fed by CI). APP_VERSION / GIT_SHA / BUILD_TIME environment variables
override them at process start, see hello_web.core.config.
"""

VERSION = "0.0.0-dev"
GIT_SHA = "dev"
BUILD_TIME = "unknown"
