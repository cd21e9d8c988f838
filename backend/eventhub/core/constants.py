"""
Static content for the landing page.

Featured events are curated by hand and are not read from the database.
"""

LANDING_HEADLINE = "The Hub for Every Dev. Events you can't miss"
LANDING_SUBHEADLINE = "Hackathons, Meetups, and Conferences, All in one place."

FEATURED_EVENTS = [
    {
        "title": "React Summit US 2025",
        "image": "/images/event1.png",
        "slug": "react-summit-us-2025",
        "location": "San Francisco, CA, USA",
        "date": "2025-11-07",
        "time": "09:00",
    },
    {
        "title": "KubeCon + CloudNativeCon Europe 2026",
        "image": "/images/event2.png",
        "slug": "kubecon-cloudnativecon-europe-2026",
        "location": "Vienna, Austria",
        "date": "2026-03-18",
        "time": "10:00",
    },
    {
        "title": "AWS re:Invent 2025",
        "image": "/images/event3.png",
        "slug": "aws-reinvent-2025",
        "location": "Las Vegas, NV, USA",
        "date": "2025-12-01",
        "time": "08:30",
    },
    {
        "title": "Next.js Conf 2025",
        "image": "/images/event4.png",
        "slug": "nextjs-conf-2025",
        "location": "San Francisco, CA, USA",
        "date": "2025-10-22",
        "time": "09:30",
    },
    {
        "title": "Google Cloud Next 2026",
        "image": "/images/event5.png",
        "slug": "google-cloud-next-2026",
        "location": "Las Vegas, NV, USA",
        "date": "2026-04-22",
        "time": "09:00",
    },
    {
        "title": "ETHGlobal Hackathon: Lisbon 2026",
        "image": "/images/event6.png",
        "slug": "ethglobal-hackathon-lisbon-2026",
        "location": "Lisbon, Portugal",
        "date": "2026-05-15",
        "time": "10:00",
    },
]
