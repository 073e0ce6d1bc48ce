#!/usr/bin/env python3
"""
Environment and Provider Diagnostics Script

This script prints the runtime configuration of the resume analyzer.
Use this to verify that:
1. The environment parses into valid settings
2. The configured generative provider can be built and released
3. A deterministic (fallback-only) analysis runs end to end

Usage:
    python scripts/inspect_env.py
"""

import asyncio
import sys

from pydantic import ValidationError

SAMPLE_RESUME = """
Jane Doe - Software Engineer

Experience
- Developed Python and React services deployed on AWS with Docker
- Led a team of four engineers and managed the release process

Education
Bachelor of Science, Computer Science, State University
"""


async def check_provider(config) -> str:
    """Build the configured provider once and release it."""
    from resume_ats.agent import AgentManager

    manager = AgentManager(config=config)
    async with manager.session() as provider:
        return type(provider).__name__


def main():
    from resume_ats.core.config import Settings, setup_logging

    print("=" * 60)
    print("Resume ATS Analyzer Diagnostics")
    print("=" * 60)

    try:
        settings = Settings()
    except ValidationError as e:
        print("\n❌ Invalid configuration:")
        for err in e.errors():
            print(f"   • {'.'.join(str(p) for p in err['loc'])}: {err['msg']}")
        sys.exit(1)

    setup_logging(settings.LOG_LEVEL)

    print("\n🤖 LLM Configuration:")
    print(f"  LLM_PROVIDER:             {settings.LLM_PROVIDER or '(not set)'}")
    print(f"  LL_MODEL:                 {settings.LL_MODEL}")
    print(f"  LLM_MAX_TOKENS:           {settings.LLM_MAX_TOKENS}")
    print(f"  LLM_TEMPERATURE:          {settings.LLM_TEMPERATURE}")
    print(f"  LLM_BASE_URL:             {settings.LLM_BASE_URL or '(not set)'}")
    print(f"  LLM_API_KEY:              {'✅ Set' if settings.LLM_API_KEY else '(not set)'}")
    print(f"  PROVIDER_TIMEOUT_SECONDS: {settings.PROVIDER_TIMEOUT_SECONDS}")
    print(f"  ALLOW_FALLBACK_ONLY:      {settings.ALLOW_FALLBACK_ONLY}")

    print("\n📊 Scoring Configuration:")
    print(f"  SKILL_SCORE_WEIGHT:       {settings.SKILL_SCORE_WEIGHT}")
    print(f"  EXPERIENCE_SCORE_WEIGHT:  {settings.EXPERIENCE_SCORE_WEIGHT}")
    print(f"  EDUCATION_SCORE_WEIGHT:   {settings.EDUCATION_SCORE_WEIGHT}")
    print(f"  MAX_SKILLS:               {settings.MAX_SKILLS}")
    print(f"  MAX_RECOMMENDATIONS:      {settings.MAX_RECOMMENDATIONS}")

    print("\n✅ VALIDATION CHECKS")
    print("-" * 40)

    errors = []
    warnings = []

    if settings.provider_enabled:
        from resume_ats.agent import ProviderError

        try:
            built = asyncio.run(check_provider(settings))
            print(f"✅ Generative provider: {settings.LLM_PROVIDER} ({built})")
        except ProviderError as e:
            print(f"⚠️  Generative provider unavailable: {e}")
            warnings.append(f"Provider {settings.LLM_PROVIDER} unavailable, analyses will use the deterministic path")
    elif settings.ALLOW_FALLBACK_ONLY:
        print("ℹ️  No generative provider: deterministic analysis only")
    else:
        print("❌ No generative provider and ALLOW_FALLBACK_ONLY is disabled")
        errors.append("Set LLM_PROVIDER or enable ALLOW_FALLBACK_ONLY")

    if settings.PROVIDER_TIMEOUT_SECONDS > 10:
        warnings.append(f"PROVIDER_TIMEOUT_SECONDS={settings.PROVIDER_TIMEOUT_SECONDS} is above the recommended 10s")
    else:
        print(f"✅ Provider timeout: {settings.PROVIDER_TIMEOUT_SECONDS}s")

    print("\n🔧 RUNTIME TEST (fallback only)")
    print("-" * 40)

    try:
        from resume_ats.services import AnalysisService

        offline = settings.model_copy(update={"LLM_PROVIDER": None, "ALLOW_FALLBACK_ONLY": True})
        result = asyncio.run(AnalysisService(config=offline).analyze(SAMPLE_RESUME, "sample.txt"))
        print(f"✅ Overall score: {result.overall_score}")
        print(f"   Skills: {', '.join(result.skills)}")
        print(f"   Recommendations: {len(result.recommendations)}")
    except Exception as e:
        print(f"❌ Analysis failed: {e}")
        errors.append(f"Fallback analysis failed: {e}")

    print("\n" + "=" * 60)
    if errors:
        print("❌ ERRORS FOUND:")
        for err in errors:
            print(f"   • {err}")
        sys.exit(1)
    elif warnings:
        print("⚠️  WARNINGS (non-critical):")
        for warn in warnings:
            print(f"   • {warn}")
        sys.exit(0)
    else:
        print("✅ ALL CHECKS PASSED")
        sys.exit(0)


if __name__ == "__main__":
    main()
