"""Built-in demo catalog used when no catalog file is configured."""

from __future__ import annotations

from .models import Title


SAMPLE_TITLES: tuple[Title, ...] = (
    Title(
        title="Stranger Things",
        description=(
            "When a young boy vanishes, a small town uncovers a mystery involving"
            " secret experiments, terrifying supernatural forces, and one strange"
            " little girl."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/49WJfeN0moxb9IPfGn8AIqMGskD.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/56v2KjBlU4XaOv9rVYEQypROD7P.jpg",
        release_year=2016,
        rating="TV-14",
        duration_minutes=50,
        genres="Sci-Fi, Horror",
        is_movie=False,
        is_trending=True,
        is_featured=True,
    ),
    Title(
        title="The Crown",
        description=(
            "Follows the political rivalries and romance of Queen Elizabeth II's"
            " reign and the events that shaped the second half of the 20th century."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/1M876Kj8FgGzfSJkXhgdXz5QrZ5.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/1M876Kj8FgGzfSJkXhgdXz5QrZ5.jpg",
        release_year=2016,
        rating="TV-MA",
        duration_minutes=60,
        genres="Drama, History",
        is_movie=False,
        is_trending=True,
        is_featured=False,
    ),
    Title(
        title="Ozark",
        description=(
            "A financial advisor drags his family from Chicago to the Missouri"
            " Ozarks, where he must launder money to appease a Mexican drug cartel."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/mY7SeH4HFFxW1hiI6cWuwCRKptN.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/mY7SeH4HFFxW1hiI6cWuwCRKptN.jpg",
        release_year=2017,
        rating="TV-MA",
        duration_minutes=60,
        genres="Crime, Drama, Thriller",
        is_movie=False,
        is_trending=True,
        is_featured=False,
    ),
    Title(
        title="The Witcher",
        description=(
            "Geralt of Rivia, a solitary monster hunter, struggles to find his place"
            " in a world where people often prove more wicked than beasts."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/7vjaCdMw15FEbXyLQTVa04URsPm.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/7vjaCdMw15FEbXyLQTVa04URsPm.jpg",
        release_year=2019,
        rating="TV-MA",
        duration_minutes=60,
        genres="Action, Adventure, Drama",
        is_movie=False,
        is_trending=True,
        is_featured=False,
    ),
    Title(
        title="Bridgerton",
        description=(
            "Wealth, lust, and betrayal set in the backdrop of Regency era England,"
            " seen through the eyes of the powerful Bridgerton family."
        ),
        release_year=2020,
        rating="TV-MA",
        duration_minutes=60,
        genres="Drama, Romance",
        is_movie=False,
        is_trending=True,
        is_featured=False,
    ),
    Title(
        title="Extraction",
        description=(
            "A hardened mercenary's mission becomes a soul-searing race to survive"
            " and protect one boy's innocence against overwhelming odds."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/7W0G3YECgDAfnui7UOqOuR0zH4h.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/7W0G3YECgDAfnui7UOqOuR0zH4h.jpg",
        release_year=2020,
        rating="R",
        duration_minutes=116,
        genres="Action, Thriller",
        is_movie=True,
        is_trending=False,
        is_featured=True,
    ),
    Title(
        title="The Queen's Gambit",
        description=(
            "In a 1950s orphanage, a young girl reveals an astonishing talent for"
            " chess and begins an unlikely journey to stardom while grappling with"
            " addiction."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/zU0htwkhNvBQdVSIKB9s6hgVeFK.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/zU0htwkhNvBQdVSIKB9s6hgVeFK.jpg",
        release_year=2020,
        rating="TV-MA",
        duration_minutes=60,
        genres="Drama",
        is_movie=False,
        is_trending=True,
        is_featured=False,
    ),
    Title(
        title="Money Heist",
        description=(
            "An unusual group of robbers attempt to carry out the most perfect"
            " robbery in Spanish history - stealing 2.4 billion euros from the"
            " Royal Mint of Spain."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/reEMJA1uzscCbkpeRJeTT2bjqUp.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/reEMJA1uzscCbkpeRJeTT2bjqUp.jpg",
        release_year=2017,
        rating="TV-MA",
        duration_minutes=70,
        genres="Crime, Drama, Thriller",
        is_movie=False,
        is_trending=True,
        is_featured=False,
    ),
    Title(
        title="Bird Box",
        description=(
            "Five years after an invisible presence drives most of society to"
            " suicide, a survivor and her two children make a desperate bid to"
            " reach safety."
        ),
        poster_url="https://image.tmdb.org/t/p/w500/rGfGfgL2pEPCfhIvqHXieXFn7gp.jpg",
        backdrop_url="https://image.tmdb.org/t/p/w1280/rGfGfgL2pEPCfhIvqHXieXFn7gp.jpg",
        release_year=2018,
        rating="R",
        duration_minutes=124,
        genres="Horror, Thriller",
        is_movie=True,
        is_trending=False,
        is_featured=False,
    ),
)
