"""
Fallback question banks.

Pre-authored items used whenever generation fails or returns output that
cannot be parsed. Records use the same shape the model is asked for, so
they pass through the same normalization.
"""

GENERIC_CATEGORY = "Online Safety"

FALLBACK_QUESTIONS: dict[str, list[dict]] = {
    "UPI Safety": [
        {
            "question": "What should you do before making a UPI payment?",
            "options": [
                "Share your UPI PIN with the sender",
                "Verify the recipient's name and UPI ID",
                "Use any public WiFi network",
                "Ignore transaction notifications",
            ],
            "correctAnswer": 1,
            "explanation": "Always verify the recipient's details before making any UPI payment to avoid sending money to the wrong person.",
        },
        {
            "question": "Which of the following is the safest way to use UPI?",
            "options": [
                "Share your UPI ID on social media",
                "Use UPI only on trusted apps",
                "Use the same PIN for all accounts",
                "Ignore security updates",
            ],
            "correctAnswer": 1,
            "explanation": "Using UPI only on trusted, official banking apps ensures your transactions are secure.",
        },
        {
            "question": "What should you do if you receive a UPI payment request from an unknown number?",
            "options": [
                "Accept it immediately",
                "Ignore and block the number",
                "Call the number to verify",
                "Share your UPI ID with them",
            ],
            "correctAnswer": 1,
            "explanation": "Never accept payment requests from unknown sources as they could be scams.",
        },
        {
            "question": "Which of these is NOT a safe UPI practice?",
            "options": [
                "Using a strong, unique PIN",
                "Keeping your UPI ID private",
                "Sharing your UPI PIN with family members",
                "Using official banking apps only",
            ],
            "correctAnswer": 2,
            "explanation": "Never share your UPI PIN with anyone, including family members, for security reasons.",
        },
        {
            "question": "What should you do if you suspect a fraudulent UPI transaction?",
            "options": [
                "Wait and see if it resolves itself",
                "Contact your bank immediately",
                "Share details on social media",
                "Ignore it completely",
            ],
            "correctAnswer": 1,
            "explanation": "Immediately contact your bank if you suspect fraud to minimize losses and protect your account.",
        },
    ],
    "Budgeting": [
        {
            "question": "What is the 50/30/20 budgeting rule?",
            "options": [
                "50% needs, 30% wants, 20% savings",
                "50% savings, 30% needs, 20% wants",
                "50% wants, 30% savings, 20% needs",
                "50% entertainment, 30% food, 20% bills",
            ],
            "correctAnswer": 0,
            "explanation": "The 50/30/20 rule suggests allocating 50% to needs, 30% to wants, and 20% to savings and debt repayment.",
        },
        {
            "question": "What is the first step in creating a budget?",
            "options": [
                "Set financial goals",
                "Track your income and expenses",
                "Cut all unnecessary spending",
                "Open a savings account",
            ],
            "correctAnswer": 1,
            "explanation": "You need to understand your current financial situation before creating an effective budget.",
        },
        {
            "question": "Which expense category should you prioritize in your budget?",
            "options": [
                "Entertainment and dining out",
                "Essential needs like food and shelter",
                "Shopping and luxury items",
                "Vacation planning",
            ],
            "correctAnswer": 1,
            "explanation": "Essential needs like food, shelter, and utilities should always be prioritized in your budget.",
        },
        {
            "question": "What percentage of your income should you aim to save?",
            "options": [
                "At least 5-10%",
                "At least 20%",
                "At least 50%",
                "Whatever is left after spending",
            ],
            "correctAnswer": 1,
            "explanation": "Aim to save at least 20% of your income for emergencies and future goals.",
        },
        {
            "question": "What is an emergency fund?",
            "options": [
                "Money saved for vacations",
                "Money saved for unexpected expenses",
                "Money invested in stocks",
                "Money borrowed from friends",
            ],
            "correctAnswer": 1,
            "explanation": "An emergency fund is money set aside for unexpected expenses like medical bills or job loss.",
        },
    ],
    "Online Safety": [
        {
            "question": "What should you do if you receive a suspicious SMS asking for OTP?",
            "options": [
                "Reply with the OTP immediately",
                "Call the number back to verify",
                "Ignore and delete the message",
                "Forward it to friends",
            ],
            "correctAnswer": 2,
            "explanation": "Never share OTPs with anyone, even if they claim to be from your bank. Legitimate banks never ask for OTPs via SMS.",
        },
        {
            "question": "Which of these is a safe online banking practice?",
            "options": [
                "Using public WiFi for banking",
                "Sharing login credentials with family",
                "Using strong, unique passwords",
                "Saving passwords in browser",
            ],
            "correctAnswer": 2,
            "explanation": "Using strong, unique passwords for each account is essential for online security.",
        },
        {
            "question": "What should you do if you suspect your bank account has been compromised?",
            "options": [
                "Wait and monitor the situation",
                "Contact your bank immediately",
                "Share the issue on social media",
                "Change your password next week",
            ],
            "correctAnswer": 1,
            "explanation": "Immediately contact your bank if you suspect fraud to protect your account and minimize losses.",
        },
        {
            "question": "Which of these is NOT a safe online practice?",
            "options": [
                "Using two-factor authentication",
                "Logging out after each session",
                "Sharing personal information on social media",
                "Using secure websites (HTTPS)",
            ],
            "correctAnswer": 2,
            "explanation": "Never share personal information like address, phone number, or financial details on social media.",
        },
        {
            "question": "What should you do before clicking on a link in an email?",
            "options": [
                "Click immediately if it looks interesting",
                "Hover over the link to check the URL",
                "Forward it to friends",
                "Reply to the sender",
            ],
            "correctAnswer": 1,
            "explanation": "Always hover over links to verify the actual URL before clicking to avoid phishing scams.",
        },
    ],
    "Interest Rates": [
        {
            "question": "What is compound interest?",
            "options": [
                "Interest earned only on the principal amount",
                "Interest earned on both principal and accumulated interest",
                "A fixed rate that never changes",
                "A penalty for late payments",
            ],
            "correctAnswer": 1,
            "explanation": "Compound interest is interest earned on both the initial principal and the accumulated interest from previous periods.",
        },
        {
            "question": "Which type of loan typically has the highest interest rate?",
            "options": [
                "Home loan",
                "Car loan",
                "Credit card",
                "Education loan",
            ],
            "correctAnswer": 2,
            "explanation": "Credit cards typically have the highest interest rates, often 15-25% or more.",
        },
        {
            "question": "What happens when interest rates increase?",
            "options": [
                "Borrowing becomes cheaper",
                "Borrowing becomes more expensive",
                "Savings rates decrease",
                "Nothing changes",
            ],
            "correctAnswer": 1,
            "explanation": "When interest rates increase, borrowing becomes more expensive as you pay more interest on loans.",
        },
        {
            "question": "What is APR?",
            "options": [
                "Annual Percentage Rate",
                "Average Payment Rate",
                "Annual Payment Return",
                "Average Percentage Return",
            ],
            "correctAnswer": 0,
            "explanation": "APR stands for Annual Percentage Rate and represents the yearly interest rate including fees.",
        },
        {
            "question": "Which is better for borrowers: fixed or variable interest rates?",
            "options": [
                "Fixed rates are always better",
                "Variable rates are always better",
                "It depends on market conditions",
                "There's no difference",
            ],
            "correctAnswer": 2,
            "explanation": "The choice between fixed and variable rates depends on current market conditions and your risk tolerance.",
        },
    ],
    "Digital Banking": [
        {
            "question": "What is the main advantage of digital banking?",
            "options": [
                "Higher interest rates",
                "Convenience and 24/7 access",
                "Lower fees",
                "Better customer service",
            ],
            "correctAnswer": 1,
            "explanation": "Digital banking provides convenience and 24/7 access to your accounts from anywhere.",
        },
        {
            "question": "Which of these is a digital banking security feature?",
            "options": [
                "Two-factor authentication",
                "Sharing passwords",
                "Using public computers",
                "Saving login details",
            ],
            "correctAnswer": 0,
            "explanation": "Two-factor authentication adds an extra layer of security to your digital banking account.",
        },
        {
            "question": "What should you do after using a public computer for banking?",
            "options": [
                "Leave it logged in for convenience",
                "Log out and clear browser history",
                "Save your password",
                "Share the computer with others",
            ],
            "correctAnswer": 1,
            "explanation": "Always log out and clear browser history when using public computers to protect your information.",
        },
        {
            "question": "Which is safer for online transactions?",
            "options": [
                "Debit card",
                "Credit card",
                "Both are equally safe",
                "Cash only",
            ],
            "correctAnswer": 1,
            "explanation": "Credit cards offer better fraud protection and don't directly access your bank account.",
        },
        {
            "question": "What is a digital wallet?",
            "options": [
                "A physical wallet for digital items",
                "A mobile app that stores payment information",
                "A type of bank account",
                "A cryptocurrency",
            ],
            "correctAnswer": 1,
            "explanation": "A digital wallet is a mobile app that stores payment information for convenient transactions.",
        },
    ],
    "Investment Basics": [
        {
            "question": "What is diversification in investing?",
            "options": [
                "Putting all money in one investment",
                "Spreading money across different investments",
                "Investing only in stocks",
                "Avoiding all investments",
            ],
            "correctAnswer": 1,
            "explanation": "Diversification means spreading your money across different types of investments to reduce risk.",
        },
        {
            "question": "Which investment typically has the lowest risk?",
            "options": [
                "Stocks",
                "Bonds",
                "Cryptocurrency",
                "Real estate",
            ],
            "correctAnswer": 1,
            "explanation": "Bonds typically have lower risk compared to stocks, cryptocurrency, and real estate.",
        },
        {
            "question": "What is compound interest in investing?",
            "options": [
                "Interest earned only on initial investment",
                "Interest earned on investment plus previous earnings",
                "A type of tax",
                "A fee charged by brokers",
            ],
            "correctAnswer": 1,
            "explanation": "Compound interest means earning interest on both your initial investment and the interest you've already earned.",
        },
        {
            "question": "What is the main benefit of long-term investing?",
            "options": [
                "Immediate returns",
                "Reduced risk and potential for growth",
                "No taxes",
                "Guaranteed profits",
            ],
            "correctAnswer": 1,
            "explanation": "Long-term investing reduces risk and provides potential for growth through compound interest.",
        },
        {
            "question": "What should you consider before investing?",
            "options": [
                "Only the potential returns",
                "Your risk tolerance and financial goals",
                "What your friends are investing in",
                "The latest trends",
            ],
            "correctAnswer": 1,
            "explanation": "Before investing, consider your risk tolerance, financial goals, and investment timeline.",
        },
    ],
}


def fallback_questions(category: str, count: int) -> list[dict]:
    """
    Return up to `count` pre-authored records for the category.

    Unknown categories get the generic online-safety bank. The result is
    never longer than the bank; it is never empty for count >= 1.
    """
    bank = FALLBACK_QUESTIONS.get(category) or FALLBACK_QUESTIONS[GENERIC_CATEGORY]
    return [dict(record) for record in bank[:max(count, 0)]]
