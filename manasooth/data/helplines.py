# manasooth/data/helplines.py
# Mental health helplines in India, grouped the way the support page lists them.

government_helplines = [
    {
        "id": "kiran-helpline",
        "name": "KIRAN (Ministry of Social Justice & Empowerment)",
        "contact": "1800-599-0019",
        "description": "A 24x7 toll-free mental health rehabilitation helpline offering support in 13 languages. "
                       "Provides early screening, first-aid, psychological support, distress management, and referrals.",
        "availability": "24×7 (Toll-Free)",
        "notes": "Available in 13 languages.",
    },
    {
        "id": "nimhans-psychosocial-support",
        "name": "NIMHANS Psychosocial Support (Ministry of Health & Family Welfare)",
        "contact": "080-46110007",
        "description": "A national psychosocial support helpline by NIMHANS, Bengaluru, offering counselling and "
                       "support for mental health concerns.",
        "availability": "24×7 (Toll-Free)",
    },
]

ngo_and_private_helplines = [
    {
        "id": "vandrevala-foundation",
        "name": "Vandrevala Foundation",
        "contact": "+91-9999-666-555 (Call or WhatsApp)",
        "description": "Provides free psychological counselling and crisis mediation by professionally trained counsellors.",
        "availability": "24×7×365",
    },
    {
        "id": "aasra",
        "name": "AASRA (Mumbai-based Suicide Prevention & Counselling)",
        "contact": "022-2754-6669 / +91-9820466726",
        "description": "Offers confidential support for individuals in distress and those experiencing suicidal thoughts.",
        "availability": "24×7 (Confidential)",
    },
    {
        "id": "icall-tiss",
        "name": "iCall (TISS School of Human Ecology)",
        "contact": "91529-87821",
        "description": "Provides professional and confidential counselling, information, and referral services "
                       "via telephone and email.",
        "availability": "Mon–Sat, 10 am–8 pm",
    },
    {
        "id": "1life",
        "name": "1Life",
        "contact": "07893-078930",
        "description": "A suicide prevention helpline offering emotional support to those who are in distress or despair.",
        "availability": "24×7",
    },
    {
        "id": "lifeline-foundation-kolkata",
        "name": "Lifeline Foundation (Kolkata)",
        "contact": "+91-9088030303 / 033-40447437",
        "description": "Offers emotional support to people who are in distress, despair or suicidal.",
        "availability": "10 am–10 pm Daily",
    },
    {
        "id": "samaritans-mumbai",
        "name": "Samaritans Mumbai",
        "contact": "+91-84229-84530 / +91-84229-84528 / +91-84229-84529",
        "description": "Provides confidential emotional support to anyone in distress or despair, including those who are suicidal.",
        "availability": "Daily, 3 pm–9 pm",
    },
    {
        "id": "sneha-chennai",
        "name": "Sneha (Chennai)",
        "contact": "044-24640050 / 044-24640060",
        "description": "Offers unconditional emotional support to people in distress, despair, or suicidal.",
        "availability": "24×7",
    },
    {
        "id": "muktaa-lgbtq-helpline",
        "name": "Muktaa Charitable Foundation (Maharashtra LGBTQ Helpline)",
        "contact": "07887-889882",
        "description": "A dedicated helpline providing support for LGBTQ individuals in Maharashtra.",
        "availability": "Mon–Sat, 12 pm–8 pm",
    },
    {
        "id": "jeevan-aastha-helpline",
        "name": "Jeevan Aastha Helpline (Gandhinagar Police Initiative)",
        "contact": "1800-233-3330",
        "description": "A 24x7 suicide prevention helpline initiated by Gandhinagar Police.",
        "availability": "24×7",
    },
    {
        "id": "parivarthan-counselling",
        "name": "Parivarthan Counselling",
        "contact": "+91-7676-602-602",
        "description": "Offers counselling, training, and awareness programs related to mental health.",
        "availability": "Timings vary",
    },
    {
        "id": "roshni-trust-hyderabad",
        "name": "Roshni Trust (Hyderabad)",
        "contact": "040-66202000 / 040-66202001 / +91-8142020033",
        "description": "Provides free and confidential emotional support to people who are in distress or despair.",
        "availability": "Daily, 11 am to 9 pm",
    },
    {
        "id": "ngo-space-lgbtq-helpline",
        "name": "NGO Space LGBTQ Helpline",
        "contact": "1800-111-015",
        "description": "A 24x7 helpline dedicated to supporting the LGBTQ community across India.",
        "availability": "24×7",
    },
]

# Fixed consultation slots offered on any bookable day.
consultation_time_slots = [
    "09:00 AM", "09:30 AM", "10:00 AM", "10:30 AM",
    "11:00 AM", "11:30 AM", "01:00 PM", "01:30 PM",
    "02:00 PM", "02:30 PM", "03:00 PM", "03:30 PM", "04:00 PM",
]
