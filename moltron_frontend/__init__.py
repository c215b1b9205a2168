"""moltron-frontend: Next.js + shadcn/ui project scaffolding with themed aesthetics."""

__version__ = "1.0.0"
