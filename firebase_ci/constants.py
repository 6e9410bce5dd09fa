"""
firebase-ci Constants

Centralized constants for environment variable names, file names and defaults.
"""

# Settings files (relative to the working directory)
SETTINGS_FILE = ".firebaserc"
FIREBASE_JSON_FILE = "firebase.json"
PACKAGE_JSON_FILE = "package.json"
FUNCTIONS_DIR = "functions"

# Branch variables in lookup order: (variable, provider)
BRANCH_ENV_VARS = (
    ("GITHUB_HEAD_REF", "github_actions"),
    ("GITHUB_REF", "github_actions"),
    ("CI_COMMIT_REF_SLUG", "gitlab"),
    ("TRAVIS_BRANCH", "travis"),
    ("CIRCLE_BRANCH", "circleci"),
    ("WERCKER_GIT_BRANCH", "wercker"),
    ("DRONE_BRANCH", "drone"),
    ("CI_BRANCH", "codeship"),
    ("BITBUCKET_BRANCH", "bitbucket"),
)
GITHUB_REF_PREFIX = "refs/heads/"
DEFAULT_BRANCH = "master"

# Provider detection: any listed variable being set identifies the provider
CI_PROVIDER_ENV_VARS = {
    "github_actions": ("GITHUB_ACTIONS", "GITHUB_HEAD_REF", "GITHUB_REF"),
    "gitlab": ("GITLAB_CI", "CI_COMMIT_REF_SLUG"),
    "travis": ("TRAVIS", "TRAVIS_BRANCH", "TRAVIS_PULL_REQUEST"),
    "circleci": ("CIRCLECI", "CIRCLE_BRANCH", "CIRCLE_PR_NUMBER"),
    "wercker": ("WERCKER", "WERCKER_GIT_BRANCH"),
    "drone": ("DRONE", "DRONE_BRANCH"),
    "codeship": ("CI_BRANCH",),
    "bitbucket": ("BITBUCKET_BRANCH", "BITBUCKET_BUILD_NUMBER"),
}

# Pull request indicators (value "false" means not a pull request)
PULL_REQUEST_ENV_VARS = ("TRAVIS_PULL_REQUEST", "CIRCLE_PR_NUMBER")

# Commit message variables in lookup order
COMMIT_MESSAGE_ENV_VARS = (
    "TRAVIS_COMMIT_MESSAGE",
    "CI_COMMIT_MESSAGE",
    "CI_MESSAGE",
)
ENV_GITHUB_ACTIONS = "GITHUB_ACTIONS"
ENV_GITHUB_SHA = "GITHUB_SHA"
ENV_GITHUB_ENV = "GITHUB_ENV"

# firebase-ci specific variables
ENV_PROJECT_OVERRIDE = "FIREBASE_CI_PROJECT"
ENV_ENVIRONMENT_SLUG = "CI_ENVIRONMENT_SLUG"
ENV_TOKEN = "FIREBASE_TOKEN"
ENV_DEBUG = "FIREBASE_CI_DEBUG"

# Project alias keys with fallback significance
MASTER_KEY = "master"
DEFAULT_KEY = "default"

# Deploy message
DEFAULT_DEPLOY_MESSAGE = "Update"
MAX_MESSAGE_LENGTH = 150

# External tools
FIREBASE_BIN = "firebase"
NPX_BIN = "npx"
NPM_BIN = "npm"
FIREBASE_TOOLS_PACKAGE = "firebase-tools"
NPM_WARNING_MARKER = "npm WARN"

# createConfig
DEFAULT_CONFIG_PATH = "./src/config.js"

# Log Configuration (FIREBASE_CI_LOG_FILE appends a plain-text copy of all output)
LOG_TIME_FORMAT = "%H:%M:%S"
ENV_LOG_FILE = "FIREBASE_CI_LOG_FILE"
