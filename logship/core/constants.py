"""
Project constants definitions
"""

# ============================================================
# Monitor Defaults
# ============================================================

DEFAULT_LOG_PATH = "/var/log/httpd/access.log"
DEFAULT_THRESHOLD_BYTES = 1024 ** 3  # 1GB
DEFAULT_AUDIT_LOG = "/var/log/monitor_log_size.log"

# ============================================================
# Jenkins Defaults
# ============================================================

DEFAULT_JENKINS_URL = "http://jenkins-server:8080/"
DEFAULT_JENKINS_JOB = "upload-access-log"
DEFAULT_JENKINS_USER = "admin"
DEFAULT_JOB_PARAMETER = "LOG_PATH"

CRUMB_ISSUER_PATH = "crumbIssuer/api/json"
BUILD_WITH_PARAMETERS_PATH = "job/{job}/buildWithParameters"

# ============================================================
# Upload Job Defaults
# ============================================================

DEFAULT_S3_BUCKET = "logs-2025y"
DEFAULT_S3_REGION = "us-east-1"
DEFAULT_JOB_TIMEOUT = 60 * 60  # seconds
DEFAULT_TEE_PATH = "/usr/bin/tee"

OBJECT_KEY_PREFIX = "logs"
OBJECT_KEY_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S"
UNKNOWN_HOST = "unknown-host"

TRUNCATE_MODES = ("auto", "direct", "sudo")

# ============================================================
# Audit Log Format
# ============================================================

AUDIT_LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
AUDIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
