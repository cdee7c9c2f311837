"""codepipeline-stack: Pulumi declarations for an AWS CodeBuild/CodePipeline setup."""

__version__ = "0.1.0"
