"""Initial locations schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

SafeBed Locations Store
- public.locations (PostGIS geography point, generated latitude/longitude)
- public.nearby_locations(...) radius search used by the API
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the locations table, indexes and the nearby_locations function."""
    op.execute("CREATE EXTENSION IF NOT EXISTS postgis")
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    # ENUM 타입 생성
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE public.location_category AS ENUM (
                'shelter', 'warming_cooling', 'food_bank', 'drop_in', 'washroom',
                'harm_reduction', 'outreach', 'clinic', 'other'
            );
        EXCEPTION
            WHEN duplicate_object THEN NULL;
        END $$;
    """)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE public.gender_restriction AS ENUM (
                'women', 'men', 'all', 'youth', 'family'
            );
        EXCEPTION
            WHEN duplicate_object THEN NULL;
        END $$;
    """)

    # ============================================
    # public.locations 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS public.locations (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            name TEXT NOT NULL,
            category public.location_category NOT NULL,
            gender_restriction public.gender_restriction DEFAULT 'all',
            lgbtq_friendly BOOLEAN DEFAULT TRUE,
            accessible BOOLEAN,
            pets_allowed BOOLEAN,
            phone TEXT,
            website TEXT,
            address TEXT,
            hours JSONB,
            capacity INTEGER,
            beds_available INTEGER,
            notes TEXT,
            source TEXT,
            geom GEOGRAPHY(POINT, 4326) NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            last_verified_at TIMESTAMPTZ,
            latitude DOUBLE PRECISION GENERATED ALWAYS AS (ST_Y(geom::geometry)) STORED,
            longitude DOUBLE PRECISION GENERATED ALWAYS AS (ST_X(geom::geometry)) STORED
        )
    """)

    op.execute("CREATE INDEX IF NOT EXISTS idx_locations_category ON public.locations (category)")
    op.execute(
        "CREATE INDEX IF NOT EXISTS idx_locations_gender ON public.locations (gender_restriction)"
    )
    op.execute("CREATE INDEX IF NOT EXISTS idx_locations_geom ON public.locations USING GIST (geom)")

    # updated_at 자동 갱신 트리거
    op.execute("""
        CREATE OR REPLACE FUNCTION public.set_updated_at()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)
    op.execute("DROP TRIGGER IF EXISTS trg_locations_updated_at ON public.locations")
    op.execute("""
        CREATE TRIGGER trg_locations_updated_at
        BEFORE UPDATE ON public.locations
        FOR EACH ROW
        EXECUTE PROCEDURE public.set_updated_at()
    """)

    # ============================================
    # 반경 검색 함수
    # ============================================
    op.execute("""
        CREATE OR REPLACE FUNCTION public.nearby_locations(
            lat DOUBLE PRECISION,
            lng DOUBLE PRECISION,
            radius_km DOUBLE PRECISION DEFAULT 5,
            cat public.location_category DEFAULT NULL,
            only_open BOOLEAN DEFAULT FALSE,
            need_accessible BOOLEAN DEFAULT NULL,
            need_pets BOOLEAN DEFAULT NULL,
            gender_focus public.gender_restriction DEFAULT NULL
        )
        RETURNS TABLE (
            id UUID,
            name TEXT,
            category public.location_category,
            phone TEXT,
            website TEXT,
            address TEXT,
            notes TEXT,
            meters DOUBLE PRECISION,
            capacity INTEGER,
            beds_available INTEGER,
            hours JSONB,
            accessible BOOLEAN,
            pets_allowed BOOLEAN,
            gender_restriction public.gender_restriction,
            lgbtq_friendly BOOLEAN,
            updated_at TIMESTAMPTZ,
            last_verified_at TIMESTAMPTZ,
            latitude DOUBLE PRECISION,
            longitude DOUBLE PRECISION,
            source TEXT
        )
        LANGUAGE sql
        STABLE
        AS $$
            WITH me AS (
                SELECT ST_SetSRID(ST_MakePoint(lng, lat), 4326)::geography AS pt
            )
            SELECT
                l.id, l.name, l.category, l.phone, l.website, l.address, l.notes,
                ST_Distance(l.geom, me.pt) AS meters,
                l.capacity, l.beds_available, l.hours,
                l.accessible, l.pets_allowed, l.gender_restriction, l.lgbtq_friendly,
                l.updated_at, l.last_verified_at, l.latitude, l.longitude, l.source
            FROM public.locations l, me
            WHERE ST_DWithin(l.geom, me.pt, radius_km * 1000)
                AND (cat IS NULL OR l.category = cat)
                AND (need_accessible IS NULL OR l.accessible = need_accessible)
                AND (need_pets IS NULL OR l.pets_allowed = need_pets)
                AND (
                    gender_focus IS NULL
                    OR l.gender_restriction = gender_focus
                    OR l.gender_restriction = 'all'
                )
            ORDER BY meters
            LIMIT 50;
        $$
    """)


def downgrade() -> None:
    """Drop everything created by upgrade (extensions are left in place)."""
    op.execute(
        "DROP FUNCTION IF EXISTS public.nearby_locations("
        "DOUBLE PRECISION, DOUBLE PRECISION, DOUBLE PRECISION, public.location_category, "
        "BOOLEAN, BOOLEAN, BOOLEAN, public.gender_restriction)"
    )
    op.execute("DROP TRIGGER IF EXISTS trg_locations_updated_at ON public.locations")
    op.execute("DROP FUNCTION IF EXISTS public.set_updated_at()")
    op.execute("DROP TABLE IF EXISTS public.locations")
    op.execute("DROP TYPE IF EXISTS public.gender_restriction")
    op.execute("DROP TYPE IF EXISTS public.location_category")
