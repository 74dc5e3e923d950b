from branch_review.main import run

run()
